import pytest

from sqlbridge.dialects import (
    CUBRIDDialect,
    DB2390Dialect,
    DB2400Dialect,
    DB2Dialect,
    DerbyDialect,
    DialectError,
    H2Dialect,
    HSQLDialect,
    InformixDialect,
    Ingres9Dialect,
    IngresDialect,
)

SQL = "select * from t"


def test_db2_fetch_first_and_rownumber_offsets():
    dialect = DB2Dialect()
    assert dialect.apply_limit(SQL, 10, None) == "select * from t fetch first 10 rows only"
    assert dialect.apply_limit(SQL, 10, 5) == (
        "select * from ( select inner2_.*, rownumber() over(order by order of inner2_) as rownumber_ "
        "from ( select * from t fetch first 15 rows only ) as inner2_ ) as inner1_ "
        "where rownumber_ > 5 order by rownumber_"
    )
    assert dialect.apply_limit(SQL, None, 5) == (
        "select * from ( select inner2_.*, rownumber() over(order by order of inner2_) as rownumber_ "
        "from ( select * from t ) as inner2_ ) as inner1_ where rownumber_ > 5 order by rownumber_"
    )


def test_db2_variant_sequences_and_identity():
    assert DB2Dialect().sequence_next_value_string("seq") == "values nextval for seq"
    assert DB2400Dialect().sequence_next_value_string("seq") == "select nextval for seq from sysibm.sysdummy1"
    select = DB2390Dialect().identity_column_support.identity_select_string("t", "id", 4)
    assert select == "select identity_val_local() from sysibm.sysdummy1"


def test_derby_offset_fetch():
    dialect = DerbyDialect()
    assert dialect.apply_limit(SQL, 10, 5) == "select * from t OFFSET 5 ROWS FETCH NEXT 10 ROWS ONLY"
    assert dialect.sequence_next_value_string("seq") == "values next value for seq"


def test_h2_and_hsql_pagination():
    assert H2Dialect().limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert HSQLDialect().limit_clause(10, 5) == "OFFSET 5 LIMIT 10"
    assert H2Dialect().identity_column_support.identity_insert_string() == "null"
    assert HSQLDialect().sequence_next_value_string("seq") == "call next value for seq"


def test_informix_skip_first():
    dialect = InformixDialect()
    assert dialect.apply_limit(SQL, 10, 5) == "select skip 5 first 10 * from t"
    assert dialect.apply_limit(SQL, None, None) == SQL
    identity = dialect.identity_column_support
    assert identity.identity_column_string(-5) == "serial8 not null"
    assert identity.identity_select_string("t", "id", -5) == (
        "select dbinfo('bigserial') from informix.systables where tabid=1"
    )


def test_ingres_versions():
    legacy = IngresDialect()
    assert legacy.apply_limit(SQL, 10, None) == "select first 10 * from t"
    with pytest.raises(DialectError):
        legacy.apply_limit(SQL, 10, 5)
    assert not legacy.identity_column_support.supports_identity_columns()

    modern = Ingres9Dialect()
    assert modern.apply_limit(SQL, 10, 5) == "select * from t offset 5 fetch first 10 rows only"
    assert modern.identity_column_support.identity_select_string("t", "id", 4) == "select last_identity()"


def test_cubrid_limit_and_sequences():
    dialect = CUBRIDDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(10, 5) == "LIMIT 5, 10"
    assert dialect.limit_clause(None, 5) == "LIMIT 5, 9223372036854775807"
    assert dialect.sequence_next_value_string("seq") == "select seq.next_value from table({1}) as T(X)"
    assert dialect.identity_column_support.identity_insert_string() == "NULL"
