"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path

from wordforms.aggregate import WordformAggregates


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def aggregates():
    return WordformAggregates()


@pytest.fixture
def write_xml(temp_dir):
    """Write a GrammarDB-style XML file and return its path.

    The body is wrapped in <Wordlist> unless raw=True.
    """
    def _write(body: str, name: str = "A1.xml", raw: bool = False) -> Path:
        path = temp_dir / name
        content = body if raw else f"<Wordlist>\n{body}\n</Wordlist>\n"
        path.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + content, encoding='utf-8')
        return path

    return _write


@pytest.fixture
def sample_paradigms():
    """A few paradigms covering modern, Narkamaŭka and skipped variants."""
    return """
  <Paradigm pdgId="1" lemma="до+м">
    <Variant lemma="до+м" pravapis="A1957,A2008">
      <Form tag="NMS">до+м</Form>
      <Form tag="NMP">дамы+</Form>
      <Form tag="GMP" type="nonstandard">даме+ў</Form>
    </Variant>
  </Paradigm>
  <Paradigm pdgId="2" lemma="сі+нус">
    <Variant lemma="сі+нус" pravapis="A2008">
      <Form tag="NMS">сі+нус</Form>
    </Variant>
    <Variant lemma="сы+нус" pravapis="K2023">
      <Form tag="NMS">сы+нус</Form>
      <Form tag="GMS">сы+нуса</Form>
    </Variant>
  </Paradigm>
  <Paradigm pdgId="3" lemma="аб'е+кт">
    <Variant lemma="аб'е+кт" pravapis="A1957,A2008">
      <Form tag="NMS">аб'е+кт</Form>
    </Variant>
  </Paradigm>
  <Paradigm pdgId="4" lemma="у+ліца">
    <Variant lemma="у+ліца" pravapis="A2008">
      <Form tag="NFS">у+ліца</Form>
      <Form tag="AFS">уліцу+</Form>
    </Variant>
  </Paradigm>
  <Paradigm pdgId="5" lemma="што-небудзь">
    <Variant lemma="што-небудзь" pravapis="A2008">
      <Form tag="NNS">што-небудзь</Form>
    </Variant>
  </Paradigm>
"""
