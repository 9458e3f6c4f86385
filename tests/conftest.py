import pytest

from aip_charts.config import ChartSettings

SIA_PAGE_URL = ('https://www.sia.aviation-civile.gouv.fr/media/dvd/eAIP_22_JAN_2026/'
                'FRANCE/AIRAC-2026-01-22/html/eAIP/FR-AD-2.LFPG-fr-FR.html')

SIA_FILENAMES = [
    'AD_2_LFPG_ADC_01.pdf',
    'AD_2_LFPG_DATA_01.pdf',
    'AD_2_LFPG_SID_RWY26L-26R_RNAV_INSTR_02.pdf',
    'AD_2_LFPG_SID_RWY26L-26R_RNAV_INSTR_01.pdf',
    'AD_2_LFPG_IAC_RWY08R_ILS_CAT_I_FNA_01.pdf',
    'AD_2_LFPG_STAR_RWY_WEST_RNAV_01.pdf',
    'AD_2_LFPG_TXT_01.pdf',
    'AD_2_LFPG_MISC_01.pdf',
    'AD_2_LFPG_ADC_01.pdf',
]


@pytest.fixture
def settings() -> ChartSettings:
    """Settings pinned to a known AIRAC cycle."""
    return ChartSettings(airac_date='2026-01-22')


@pytest.fixture
def sia_page_url() -> str:
    return SIA_PAGE_URL


@pytest.fixture
def sia_page_html() -> str:
    """LFPG aerodrome page as published by the SIA, reduced to its chart links."""
    rows = '\n'.join(
        f'<tr><td><a href="Cartes/LFPG/{name}">{name}</a></td></tr>' for name in SIA_FILENAMES
    )
    return f"""
    <html><body>
      <h3>AD 2.24 Cartes relatives a l'aerodrome</h3>
      <a href="FR-AD-2.LFPG-fr-FR.html#AD-2.LFPG-24">AD 2.24</a>
      <table>
      {rows}
      </table>
    </body></html>
    """


@pytest.fixture
def uk_page_html() -> str:
    """EGLL AD 2.24 table: the chart title sits on the row above each link."""
    return """
    <html><body>
      <table>
        <tr><td><p>AERODROME CHART - ICAO</p></td></tr>
        <tr><td><a href="../../graphics/eAIP/EG_AD_2_EGLL_2-1_en.pdf">AD 2.EGLL-2-1</a></td></tr>
        <tr><td><p>INSTRUMENT APPROACH CHART - ILS/DME RWY 27L CAT II/III</p></td></tr>
        <tr><td><a href="../../graphics/eAIP/EG_AD_2_EGLL_8-1_en.pdf">AD 2.EGLL-8-1</a></td></tr>
        <tr><td><p>STANDARD DEPARTURE CHART - INSTRUMENT (SID) RWY 09R DET</p></td></tr>
        <tr><td><a href="../../graphics/eAIP/EG_AD_2_EGLL_6-1_en.pdf">AD 2.EGLL-6-1</a></td></tr>
        <tr><td><p>BIRD CONCENTRATIONS</p></td></tr>
        <tr><td><a href="../../graphics/eAIP/EG_AD_2_EGLL_9-1_en.pdf">AD 2.EGLL-9-1</a></td></tr>
      </table>
      <a href="../../graphics/eAIP/EG_AD_2_EGLL_2-1_en.pdf">AD 2.EGLL-2-1</a>
    </body></html>
    """
