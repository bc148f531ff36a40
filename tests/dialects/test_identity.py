from sqlbridge.dialects import IdentityColumns, IdentityColumnSupport, SqlType
from sqlbridge.dialects.identity import NO_IDENTITY_COLUMNS, TRANSACT_SQL_IDENTITY


def test_unsupported_identity_answers_nothing():
    identity = NO_IDENTITY_COLUMNS
    assert not identity.supports_identity_columns()
    assert not identity.supports_insert_select_identity()
    assert not identity.has_data_type_in_identity_column()
    assert identity.identity_select_string("t", "id", SqlType.INTEGER) is None
    assert identity.identity_column_string(SqlType.INTEGER) is None
    assert identity.identity_insert_string() is None
    assert identity.append_identity_select_to_insert("insert into t values (1)") == "insert into t values (1)"


def test_identity_columns_fill_select_template():
    identity = IdentityColumns(
        column_string="identity",
        select_template="select max({column}) from {table}",
        bigint_select_template="select big({column}) from {table}",
    )
    assert isinstance(identity, IdentityColumnSupport)
    assert identity.identity_select_string("t", "id", SqlType.INTEGER) == "select max(id) from t"
    assert identity.identity_select_string("t", "id", SqlType.BIGINT) == "select big(id) from t"
    # no bigint column string configured
    assert identity.identity_column_string(SqlType.BIGINT) == "identity"


def test_plain_ints_are_accepted_as_types():
    identity = IdentityColumns(column_string="a", bigint_column_string="b")
    assert identity.identity_column_string(-5) == "b"
    assert identity.identity_column_string(4) == "a"


def test_insert_select_support_follows_suffix():
    assert TRANSACT_SQL_IDENTITY.supports_insert_select_identity()
    assert not IdentityColumns(column_string="x").supports_insert_select_identity()
