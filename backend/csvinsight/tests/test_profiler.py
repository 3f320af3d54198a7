"""Tests for column profiling."""
import pytest

from csvinsight.ingestion.models import (
    CategorySummary,
    ColumnKind,
    DateSummary,
    NumberSummary,
)
from csvinsight.ingestion.profiler import (
    ColumnProfiler,
    TypeThresholds,
    classify_column,
    summarize,
)


def test_summarize_empty():
    """Test empty input gives the empty contract."""
    result = summarize("")
    
    assert result.is_empty
    assert result.to_contract() == {"headers": [], "rowCount": 0, "samples": [], "columns": {}}


def test_summarize_header_only():
    """Test a file with headers and no rows."""
    result = summarize("region,sales\n")
    
    assert result.headers == ["region", "sales"]
    assert result.row_count == 0
    assert isinstance(result.columns["region"], CategorySummary)
    assert result.columns["sales"].distinct_count == 0


def test_summarize_semicolon_file():
    """Test a Brazilian-style export."""
    text = (
        "produto;valor;data\n"
        "Caneta;1.234,56;15/01/2024\n"
        "Lápis;10,00;20/01/2024\n"
        "Caneta;5,50;01/02/2024\n"
    )
    result = summarize(text)
    
    assert result.headers == ["produto", "valor", "data"]
    assert result.row_count == 3
    
    valor = result.columns["valor"]
    assert isinstance(valor, NumberSummary)
    assert valor.count == 3
    assert valor.sum == pytest.approx(1250.06)
    assert valor.min == pytest.approx(5.5)
    assert valor.max == pytest.approx(1234.56)
    
    data = result.columns["data"]
    assert isinstance(data, DateSummary)
    assert data.min_date == "2024-01-15"
    assert data.max_date == "2024-02-01"


def test_number_summary_ignores_unparseable():
    """Test that count only includes parsed values."""
    text = "amount\n10\n20\n30\nn/a\n40\n"
    amount = summarize(text).columns["amount"]
    
    assert isinstance(amount, NumberSummary)
    assert amount.count == 4
    assert amount.sum == pytest.approx(100)
    assert amount.mean == pytest.approx(25)


def test_date_bucketing_sorted_by_month():
    """Test monthly buckets."""
    text = "when\n2024-02-01\n2024-01-15\n2024-01-20\n"
    when = summarize(text).columns["when"]
    
    assert isinstance(when, DateSummary)
    assert [(b.month, b.count) for b in when.by_month] == [("2024-01", 2), ("2024-02", 1)]


def test_category_values_with_blank_cell():
    """Test distinct count includes the placeholder."""
    text = "tag,n\nBooks,1\nToys,2\nBooks,3\n,4\nBooks,5\n"
    tag = summarize(text).columns["tag"]
    
    assert isinstance(tag, CategorySummary)
    assert tag.distinct_count == 3
    assert tag.top_values[0].value == "Books"
    assert tag.top_values[0].count == 3
    assert {v.value for v in tag.top_values} == {"Books", "Toys", "(empty)"}


def test_category_ties_keep_first_seen_order():
    """Test stable tie-breaking."""
    text = "c\nred\ngreen\nblue\ngreen\nred\n"
    c = summarize(text).columns["c"]
    
    assert [v.value for v in c.top_values] == ["red", "green", "blue"]


def test_category_top_values_capped():
    """Test the top-10 cap."""
    rows = "\n".join(f"cat{i}" for i in range(15))
    c = summarize("c\n" + rows).columns["c"]
    
    assert c.distinct_count == 15
    assert len(c.top_values) == 10


def test_missing_trailing_cells_count_as_empty():
    """Test short rows in categorical columns."""
    c = summarize("a,b\n1,x\n2\n3,x\n").columns["b"]
    
    assert isinstance(c, CategorySummary)
    assert [(v.value, v.count) for v in c.top_values] == [("x", 2), ("(empty)", 1)]


@pytest.mark.parametrize("numeric, total, expected", [
    (2, 3, ColumnKind.CATEGORY),
    (3, 3, ColumnKind.NUMBER),
    (2, 4, ColumnKind.CATEGORY),
    (3, 4, ColumnKind.NUMBER),
    (3, 5, ColumnKind.NUMBER),
    (2, 5, ColumnKind.CATEGORY),
    (3, 6, ColumnKind.CATEGORY),
    (4, 6, ColumnKind.NUMBER),
])
def test_classify_numeric_boundaries(numeric, total, expected):
    """Test the numeric threshold at small column sizes."""
    assert classify_column(numeric, 0, total) == expected


def test_classify_date_after_number():
    """Test date classification and precedence."""
    assert classify_column(0, 3, 6) == ColumnKind.DATE
    assert classify_column(0, 2, 4) == ColumnKind.CATEGORY
    assert classify_column(4, 6, 6) == ColumnKind.NUMBER


def test_classify_custom_thresholds():
    """Test adjustable thresholds."""
    loose = TypeThresholds(min_votes=1, numeric_ratio=0.5, date_ratio=0.5)
    assert classify_column(1, 0, 2, loose) == ColumnKind.NUMBER


def test_small_numeric_column_stays_category():
    """Test that two numbers out of three do not make a number column."""
    col = summarize("x\n1\n2\nfoo\n").columns["x"]
    assert isinstance(col, CategorySummary)


def test_summarize_is_deterministic():
    """Test repeated calls give identical output."""
    text = "k,v\nb,1\na,2\nb,3\nc,4\na,5\n"
    assert summarize(text).to_contract() == summarize(text).to_contract()


def test_profile_file(tmp_path):
    """Test profiling from disk."""
    path = tmp_path / "sales.csv"
    path.write_text("\ufeffregion,sales\nNorth,10\nSouth,20\nEast,30\n", encoding="utf-8")
    
    result = ColumnProfiler().profile_file(str(path))
    
    assert result.headers == ["region", "sales"]
    assert result.columns["sales"].type == "number"


def test_summarize_dot_grouped_integer_column():
    """Test a pt-BR integer column with thousands dots."""
    valor = summarize("valor\n1.234.567\n2.500.000\n3.000.000\n").columns["valor"]
    
    assert isinstance(valor, NumberSummary)
    assert valor.count == 3
    assert valor.sum == pytest.approx(6734567)
    assert valor.min == pytest.approx(1234567)


def test_date_column_mixed_time_keeps_day_first():
    """Test day-first dates with and without a time in one column."""
    when = summarize("when\n03/04/2024 10:30\n03/04/2024\n05/04/2024\n").columns["when"]
    
    assert isinstance(when, DateSummary)
    assert [(b.month, b.count) for b in when.by_month] == [("2024-04", 3)]
    assert when.min_date == "2024-04-03"
    assert when.max_date == "2024-04-05"


def test_date_column_excludes_unparseable_cells():
    """Test that bad cells in a date column are left out of the stats."""
    text = "when\n2024-01-15\n2024-01-20\n31/02/2024\nsoon\n"
    when = summarize(text).columns["when"]
    
    assert isinstance(when, DateSummary)
    assert [(b.month, b.count) for b in when.by_month] == [("2024-01", 2)]
    assert when.min_date == "2024-01-15"
    assert when.max_date == "2024-01-20"


def test_number_summary_overflow_normalized_to_zero():
    """Test that an infinite sum and mean are reported as 0."""
    x = summarize("x\n1e308\n1e308\n1e308\n").columns["x"]
    
    assert isinstance(x, NumberSummary)
    assert x.count == 3
    assert x.sum == 0
    assert x.mean == 0
    assert x.max == pytest.approx(1e308)


def test_summarize_ignores_clock_for_time_only_cells():
    """Test that time-only cells never become dates."""
    text = "t\n10:30\n11:45\n12:00\n"
    
    assert isinstance(summarize(text).columns["t"], CategorySummary)
