from sqlbridge.core import SqlIdentifier
from sqlbridge.dialects import MariaDBDialect, MySQLDialect, SqlType


def test_mysql_dialect_quotes_identifiers():
    dialect = MySQLDialect()
    assert dialect.quote_identifier("events") == "`events`"
    assert dialect.format_table("analytics.Events") == "`analytics`.`events`"
    assert dialect.render(SqlIdentifier.unquoted("UserName")) == "username"


def test_mysql_limit_clause():
    dialect = MySQLDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(None, 5) == "LIMIT 18446744073709551615 OFFSET 5"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert dialect.apply_limit("select * from t", 10, None) == "select * from t LIMIT 10"
    assert dialect.apply_limit("select * from t", None, None) == "select * from t"


def test_mysql_identity_and_sequences():
    dialect = MySQLDialect()
    identity = dialect.identity_column_support
    assert identity.supports_identity_columns()
    assert identity.identity_select_string("t", "id", SqlType.INTEGER) == "select last_insert_id()"
    assert identity.identity_column_string(SqlType.BIGINT) == "not null auto_increment"
    assert dialect.sequence_next_value_string("seq") is None


def test_mariadb_extends_mysql_with_sequences():
    dialect = MariaDBDialect()
    assert isinstance(dialect, MySQLDialect)
    assert dialect.capabilities.supports_sequences
    assert dialect.sequence_next_value_string("order_seq") == "select nextval(order_seq)"
    assert dialect.quote_identifier("events") == "`events`"
