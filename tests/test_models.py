from sqlalchemy import UniqueConstraint

from reflect_server.models.health_entry import HealthEntry
from reflect_server.models.users import User


def unique_columns(table):
    return [
        tuple(c.name for c in constraint.columns)
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    ]


def test_users_key_is_only_the_primary_key():
    table = User.__table__
    assert [c.name for c in table.primary_key.columns] == ["user_id"]
    assert unique_columns(table) == []
    assert table.indexes == set()


def test_one_health_entry_per_user_and_date():
    assert unique_columns(HealthEntry.__table__) == [("user_id", "entry_date")]
