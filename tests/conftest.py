from unittest.mock import Mock

import pytest

SAMPLE_XML = """<?xml version="1.0" encoding="utf-8"?>
<dokumentstatus>
  <dokument>
    <hangar_id>3862826</hangar_id>
    <dok_id>sfs-1998-899</dok_id>
    <rm>1998</rm>
    <beteckning>1998:899</beteckning>
    <typ>sfs</typ>
    <subtyp>sfst</subtyp>
    <doktyp>sfs</doktyp>
    <organ>Miljö- och energidepartementet</organ>
    <nummer>899</nummer>
    <datum>1998-06-04 00:00:00</datum>
    <publicerad>2016-01-01 00:00:00</publicerad>
    <titel>Förordning (1998:899) om miljöfarlig verksamhet och hälsoskydd</titel>
    <subtitel></subtitel>
    <text>
1 §   Denna förordning gäller verksamheter
      och åtgärder som avses i 9 kap. miljöbalken.


2 §   I denna förordning avses med   tillsynsmyndighet
den myndighet som utövar tillsyn.
    </text>
  </dokument>
  <dokuppgift />
</dokumentstatus>
"""


def make_response(status_code=200, text=SAMPLE_XML, reason="OK"):
    r = Mock()
    r.status_code = status_code
    r.text = text
    r.reason = reason
    return r


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def xml_without(sample_xml):
    """Sample document with one tag removed."""

    def _build(tag):
        start = sample_xml.index(f"<{tag}>")
        end = sample_xml.index(f"</{tag}>") + len(f"</{tag}>")
        return sample_xml[:start] + sample_xml[end:]

    return _build
