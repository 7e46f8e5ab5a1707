"""
Tests for type labels and fixed-width layout calculation.
"""
import pytest

from mapping import calculate_layout, get_human_type, parse_width, TYPE_LABELS
from models import FlatFileColumn


def columns(*widths):
    return [FlatFileColumn(name=f'F{i}', data_type='129', column_width=w)
            for i, w in enumerate(widths, 1)]


class TestGetHumanType:

    @pytest.mark.parametrize('code,label', [
        ('4', 'float [DT_R4]'),
        ('19', 'four-byte unsigned integer [DT_UI4]'),
        ('129', 'string [DT_STR]'),
        ('130', 'Unicode string [DT_WSTR]'),
    ])
    def test_known_codes(self, code, label):
        assert get_human_type(code) == label

    def test_whitespace_is_trimmed(self):
        assert get_human_type(' 130\n') == 'Unicode string [DT_WSTR]'

    @pytest.mark.parametrize('code', ['999', '', '130.0', '0130', 'DT_WSTR', None])
    def test_unknown_codes(self, code):
        assert get_human_type(code) == 'undefined'

    def test_table_is_fixed(self):
        assert set(TYPE_LABELS) == {'4', '19', '129', '130'}


class TestParseWidth:

    @pytest.mark.parametrize('value,expected', [
        ('13', 13),
        (' 7 ', 7),
        ('13px', 13),
        ('+4', 4),
        ('-2', -2),
        ('abc', 0),
        ('', 0),
        (None, 0),
    ])
    def test_lenient_parse(self, value, expected):
        assert parse_width(value) == expected

    def test_custom_default(self):
        assert parse_width('n/a', default=-1) == -1


class TestCalculateLayout:

    def test_customers_layout(self):
        rows = calculate_layout([
            FlatFileColumn(name='Title', data_type='130', column_width='13'),
            FlatFileColumn(name='Gender', data_type='130', column_width='6'),
        ])
        assert [(r.index, r.start, r.end, r.name, r.type_label, r.width) for r in rows] == [
            (2, 1, 13, 'Title', 'Unicode string [DT_WSTR]', 13),
            (3, 14, 19, 'Gender', 'Unicode string [DT_WSTR]', 6),
        ]

    def test_offsets_are_contiguous(self):
        rows = calculate_layout(columns('13', '6', '1', '2', '9'))
        assert rows[0].start == 1
        for previous, row in zip(rows, rows[1:]):
            assert row.start == previous.end + 1
        for row in rows:
            assert row.end == row.start + row.width - 1
        assert [r.index for r in rows] == [2, 3, 4, 5, 6]

    def test_zero_width(self):
        rows = calculate_layout(columns('5', '0', '3'))
        assert (rows[1].start, rows[1].end) == (6, 5)
        assert (rows[2].start, rows[2].end) == (6, 8)

    def test_unparseable_width_counts_as_zero(self):
        rows = calculate_layout(columns('4', 'wide'))
        assert (rows[1].start, rows[1].end, rows[1].width) == (5, 4, 0)

    def test_unknown_type(self):
        [row] = calculate_layout([FlatFileColumn(name='X', data_type='999', column_width='1')])
        assert row.type_label == 'undefined'

    def test_no_columns(self):
        assert calculate_layout([]) == []
