"""Tests for subtitle extraction and batch pagination."""

from aip_charts.models.chart import Chart, ChartCategory
from aip_charts.parsers.subtitle import apply_pagination, extract_subtitle


def make_chart(page, subtitle='ILS', label='IAC', url=None):
    return Chart(
        category=ChartCategory.IAC,
        subtitle=subtitle,
        filename='x.pdf',
        url=url or f"https://example.org/{label}/{subtitle}/{page}.pdf",
        page=page,
        label=label,
    )


class TestExtractSubtitle:

    def test_sid_runway_moves_to_label(self):
        info = extract_subtitle('AD_2_LFPG_SID_RWY26L-26R_RNAV_INSTR_01.pdf', 'LFPG', 'SID', ChartCategory.SID)
        assert info.subtitle == 'RNAV INSTR'
        assert info.page == '01'
        assert info.runway_label == 'RWY26L-26R'

    def test_iac_structural_tokens_removed(self):
        info = extract_subtitle('AD_2_LFPG_IAC_RWY08R_ILS_CAT_I_FNA_01.pdf', 'LFPG', 'IAC', ChartCategory.IAC)
        assert info.subtitle == 'ILS CAT I FNA'
        assert info.runway_label == 'RWY08R'
        for token in ('AD', '2', 'LFPG', 'IAC', 'RWY08R'):
            assert token not in info.subtitle.split()

    def test_split_runway_group(self):
        info = extract_subtitle('AD_2_LFPG_STAR_RWY_ALL_RNAV_02.pdf', 'LFPG', 'STAR', ChartCategory.STAR)
        assert info.runway_label == 'RWY ALL'
        assert info.subtitle == 'RNAV'
        assert info.page == '02'

    def test_runway_kept_for_other_categories(self):
        info = extract_subtitle('AD_2_LFPG_ADC_RWY09_01.pdf', 'LFPG', 'ADC', ChartCategory.AERODROME)
        assert info.subtitle == 'RWY09'
        assert info.runway_label == ''

    def test_ignored_tokens_case_insensitive(self):
        info = extract_subtitle('AD_2_LFPG_ADC.pdf', 'lfpg', 'ADC', ChartCategory.AERODROME)
        assert info.subtitle == ''
        assert info.page is None

    def test_last_page_token_wins(self):
        info = extract_subtitle('AD_2_LFPG_VAC_01_02.pdf', 'LFPG', 'VAC', ChartCategory.VAC)
        assert info.page == '02'
        assert info.subtitle == ''

    def test_longer_numbers_stay_in_subtitle(self):
        info = extract_subtitle('AD_2_LFPG_TEM_2024_01.pdf', 'LFPG', 'TEM', ChartCategory.TEM)
        assert info.subtitle == '2024'
        assert info.page == '01'


class TestApplyPagination:

    def test_group_pages_regardless_of_order(self):
        second, first = make_chart('02'), make_chart('01')
        apply_pagination([second, first])
        assert first.page == '1/2'
        assert second.page == '2/2'

    def test_lone_chart_page_cleared(self):
        chart = make_chart('01', subtitle='VOR')
        apply_pagination([chart])
        assert chart.page is None

    def test_group_without_positive_page_cleared(self):
        charts = [make_chart('00'), make_chart(None)]
        apply_pagination(charts)
        assert [chart.page for chart in charts] == [None, None]

    def test_member_without_page_token(self):
        charts = [make_chart('01'), make_chart('02'), make_chart(None)]
        apply_pagination(charts)
        assert [chart.page for chart in charts] == ['1/3', '2/3', None]

    def test_groups_split_by_label(self):
        west = make_chart('01', subtitle='RNAV', label='SID RWY08L')
        east = make_chart('01', subtitle='RNAV', label='SID RWY26R')
        apply_pagination([west, east])
        assert west.page is None
        assert east.page is None

    def test_idempotent_layout(self):
        def batch():
            return [make_chart('02'), make_chart('01'), make_chart('01', subtitle='VOR')]
        first = [chart.to_dict() for chart in apply_pagination(batch())]
        second = [chart.to_dict() for chart in apply_pagination(batch())]
        assert first == second
