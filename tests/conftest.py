# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import prometheus_client
import pytest
from prometheus_client import CollectorRegistry

from xbrl_facts.config.settings import get_settings

SAMPLE_INSTANCE = """<?xml version="1.0" encoding="utf-8"?>
<xbrli:xbrl xmlns:xbrli="http://www.xbrl.org/2003/instance"
            xmlns:link="http://www.xbrl.org/2003/linkbase"
            xmlns:xlink="http://www.w3.org/1999/xlink"
            xmlns:xbrldi="http://xbrl.org/2006/xbrldi"
            xmlns:iso4217="http://www.xbrl.org/2003/iso4217"
            xmlns:dei="http://xbrl.sec.gov/dei/2023"
            xmlns:us-gaap="http://fasb.org/us-gaap/2023">
  <link:schemaRef xlink:type="simple" xlink:href="msft-20230630.xsd"/>
  <xbrli:context id="c1">
    <xbrli:entity>
      <xbrli:identifier scheme="http://www.sec.gov/CIK">0000789019</xbrli:identifier>
    </xbrli:entity>
    <xbrli:period>
      <xbrli:instant>2023-06-30</xbrli:instant>
    </xbrli:period>
  </xbrli:context>
  <xbrli:context id="c2">
    <xbrli:entity>
      <xbrli:identifier scheme="http://www.sec.gov/CIK">0000789019</xbrli:identifier>
      <xbrli:segment>
        <xbrldi:explicitMember dimension="us-gaap:StatementBusinessSegmentsAxis">msft:ProductivityAndBusinessProcessesMember</xbrldi:explicitMember>
      </xbrli:segment>
    </xbrli:entity>
    <xbrli:period>
      <xbrli:startDate>2022-07-01</xbrli:startDate>
      <xbrli:endDate>2023-06-30</xbrli:endDate>
    </xbrli:period>
  </xbrli:context>
  <xbrli:unit id="u1">
    <xbrli:measure>iso4217:USD</xbrli:measure>
  </xbrli:unit>
  <xbrli:unit id="usdPerShare">
    <xbrli:divide>
      <xbrli:unitNumerator>
        <xbrli:measure>iso4217:USD</xbrli:measure>
      </xbrli:unitNumerator>
      <xbrli:unitDenominator>
        <xbrli:measure>xbrli:shares</xbrli:measure>
      </xbrli:unitDenominator>
    </xbrli:divide>
  </xbrli:unit>
  <dei:DocumentType contextRef="c2">10-K</dei:DocumentType>
  <us-gaap:Assets contextRef="c1" unitRef="u1" decimals="-6">1000000</us-gaap:Assets>
  <us-gaap:EarningsPerShareBasic contextRef="c2" unitRef="usdPerShare" decimals="2">9.72</us-gaap:EarningsPerShareBasic>
  <dei:AmendmentFlag contextRef="c2">false</dei:AmendmentFlag>
  <us-gaap:Liabilities contextRef="missing" unitRef="u1" decimals="-6">5</us-gaap:Liabilities>
  <us-gaap:CommonStockSharesOutstanding contextRef="c1" unitRef="nounit" decimals="0">7432</us-gaap:CommonStockSharesOutstanding>
  <us-gaap:IncomeTaxPolicyTextBlock contextRef="c2">&lt;p&gt;Income taxes &lt;b&gt;are&lt;/b&gt;
      recorded.&lt;/p&gt;</us-gaap:IncomeTaxPolicyTextBlock>
</xbrli:xbrl>
"""


@pytest.fixture
def sample_instance() -> str:
    """Small MSFT-shaped instance covering units, contexts and degraded facts."""
    return SAMPLE_INSTANCE


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop the cached Settings so env changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def metrics_registry(monkeypatch: pytest.MonkeyPatch) -> CollectorRegistry:
    """Swap in an empty default Prometheus registry for the test."""
    registry = CollectorRegistry()
    monkeypatch.setattr(prometheus_client, "REGISTRY", registry)
    return registry
