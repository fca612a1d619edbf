from sqltranslate import TranslationPipeline, TranslatorConfig, translate


def test_empty_and_none_pass_through():
    assert translate("") == ""
    assert translate(None) is None


def test_top_becomes_single_limit():
    out = translate("SELECT TOP 5 * FROM [T]")
    assert out == 'SELECT * FROM "T" LIMIT 5'
    assert out.count("LIMIT 5") == 1
    assert "TOP" not in out


def test_top_with_existing_paging_does_not_add_second_limit():
    out = translate("SELECT TOP 5 * FROM [T] OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY")
    assert out == 'SELECT * FROM "T" OFFSET 0 LIMIT 10'
    assert out.count("LIMIT") == 1


def test_lowercase_keywords():
    out = translate("select top 3 name from [t] order by newid()")
    assert out == 'SELECT name from "t" order by RANDOM() LIMIT 3'


def test_report_query():
    sql = (
        "SELECT TOP 10 [u].[Name], LEN([u].[Name]) AS NameLen "
        "FROM [dbo].[Users] [u] WITH (NOLOCK) "
        "WHERE [u].[IsActive] = 1 ORDER BY NEWID()"
    )
    assert translate(sql) == (
        'SELECT "u"."Name", LENGTH("u"."Name") AS NameLen '
        'FROM "dbo"."Users" "u" '
        'WHERE "u"."IsActive" = true ORDER BY RANDOM() LIMIT 10'
    )


def test_month_grouping():
    sql = "SELECT DATENAME(MONTH, [CreatedAt]) AS MonthName, COUNT(*) FROM [Orders] GROUP BY DATENAME(MONTH, [CreatedAt])"
    assert translate(sql) == (
        "SELECT TO_CHAR(\"CreatedAt\", 'Month') AS MonthName, COUNT(*) "
        "FROM \"Orders\" GROUP BY TO_CHAR(\"CreatedAt\", 'Month')"
    )


def test_string_concat():
    assert "'a' || 'b'" in translate("SELECT 'a' + 'b'")
    assert translate("SELECT col + 'b' FROM t") == "SELECT col + 'b' FROM t"


def test_boolean_columns_only():
    assert translate('SELECT * FROM "users" WHERE "active" = 1') == 'SELECT * FROM "users" WHERE "active" = true'
    assert translate('SELECT * FROM "users" WHERE "count" = 1') == 'SELECT * FROM "users" WHERE "count" = 1'


def test_untouched_query_passes_through():
    sql = "SELECT id, name FROM users WHERE id = 1"
    assert translate(sql) == sql


def test_default_rule_order():
    assert TranslationPipeline().rule_names == [
        "strip_table_hints",
        "bracket_identifiers",
        "random_function",
        "offset_fetch",
        "top_to_limit",
        "date_functions",
        "function_renames",
        "string_concat",
        "boolean_comparisons",
    ]


def test_from_config_can_disable_boolean_rewrite():
    pipeline = TranslationPipeline.from_config(TranslatorConfig(rewrite_booleans=False))
    assert "boolean_comparisons" not in pipeline.rule_names
    assert pipeline.translate("SELECT * FROM [t] WHERE [active] = 1") == 'SELECT * FROM "t" WHERE "active" = 1'


def test_from_config_custom_fragments():
    pipeline = TranslationPipeline.from_config(TranslatorConfig(boolean_fragments=("flag",)))
    out = pipeline.translate("SELECT * FROM [t] WHERE [is_flag] = 0 AND [active] = 1")
    assert out == 'SELECT * FROM "t" WHERE "is_flag" = false AND "active" = 1'


def test_custom_rule_list():
    class Upper:
        name = "upper"

        def apply(self, sql):
            return sql.upper()

    assert TranslationPipeline([Upper()]).translate("select 1") == "SELECT 1"


def test_limit_is_appended_after_trailing_semicolon():
    # the LIMIT goes at the very end of the text; callers strip terminators first
    assert translate("SELECT TOP 5 * FROM [T];") == 'SELECT * FROM "T"; LIMIT 5'
