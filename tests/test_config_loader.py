"""Tests for loading the content schema.

The loader is tolerant by design: these tests check that missing fields take
their defaults, that malformed section entries survive as absent descriptors,
that payloads are frozen, and that only an unreadable file is an error. The
shipped ``config/site.yaml`` is loaded as a smoke test.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from aviator_pages.config import (
    Brand,
    LinkButton,
    SiteConfigError,
    build_site_config,
    load_site_config,
)
from aviator_pages.sections import default_registry

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG = REPO_ROOT / "config" / "site.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path: Path) -> None:
    """A schema path that does not exist is an error."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(SiteConfigError, match="top-level mapping"):
        load_site_config(_write(tmp_path, "- just\n- a list\n"))


def test_empty_mapping_gets_defaults() -> None:
    """An empty schema loads with default brand, header CTA, and no pages."""
    site = build_site_config({})
    assert site.brand == Brand(name="Brand", tagline="")
    assert site.header.cta == LinkButton(label="Request", href="contact.html")
    assert site.header.nav == ()
    assert dict(site.pages) == {}
    assert site.get_page("home") is None


def test_sections_and_outputs(tmp_path: Path) -> None:
    """Sections keep order, ids, and frozen data; null entries stay absent."""
    path = _write(
        tmp_path,
        """
        pages:
          home:
            seo: {title: Home}
            sections:
              - {id: top, type: hero.v1, data: {h1: Hi, cta: [{label: Go}]}}
              - null
              - {type: faqAccordion.v1}
          legal:
            output: legal-notice.html
        """,
    )
    site = load_site_config(path)
    home = site.get_page("home")
    assert home is not None
    assert home.output == "index.html"
    assert home.seo.title == "Home"
    assert home.seo.description == ""
    first, second, third = home.sections
    assert first is not None
    assert (first.id, first.type) == ("top", "hero.v1")
    assert first.data["cta"][0]["label"] == "Go"
    assert second is None
    assert third is not None
    assert dict(third.data) == {}
    assert home.section_types == ["hero.v1", "faqAccordion.v1"]
    assert site.get_page("legal").output == "legal-notice.html"


def test_section_data_is_read_only(tmp_path: Path) -> None:
    """Section payloads cannot be mutated after loading."""
    site = build_site_config(
        {"pages": {"home": {"sections": [{"type": "x", "data": {"items": [1]}}]}}}
    )
    descriptor = site.pages["home"].sections[0]
    assert descriptor is not None
    with pytest.raises(TypeError):
        descriptor.data["items"] = []  # type: ignore[index]
    assert descriptor.data["items"] == (1,)


def test_malformed_links_are_skipped() -> None:
    """Link lists drop non-mapping entries and default missing fields."""
    site = build_site_config(
        {"header": {"nav": ["oops", {"label": "Docs"}], "cta": "nope"}}
    )
    assert [(link.label, link.href) for link in site.header.nav] == [("Docs", "#")]
    assert site.header.cta.label == "Request"


@pytest.mark.parametrize("output_dir", [123, ["dist"], {"path": "dist"}, "", None])
def test_malformed_build_defaults_fall_back(output_dir: object) -> None:
    """A non-string ``defaults.output_dir`` keeps the default folder."""
    site = build_site_config(
        {"defaults": {"output_dir": output_dir, "lang": 7}, "pages": {}}
    )
    assert site.build.output_dir == Path("public")
    assert site.build.lang == "7"
    assert site.build.stylesheet == "styles.css"


def test_build_defaults_are_read() -> None:
    """String build defaults override the built-in values."""
    site = build_site_config({"defaults": {"output_dir": "dist", "stylesheet": "a.css"}})
    assert site.build.output_dir == Path("dist")
    assert site.build.stylesheet == "a.css"


def test_shipped_site_config_loads() -> None:
    """The repository's content schema loads and only uses known types."""
    site = load_site_config(SITE_CONFIG)
    assert sorted(site.pages) == ["contact", "cookies", "home", "privacy", "terms"]
    registry = default_registry()
    for page in site.pages.values():
        assert not registry.unknown_types(page.section_types), (
            f"page {page.key} uses unknown section types"
        )
    home = site.get_page("home")
    assert home is not None
    assert home.sections[0] is not None
    assert home.sections[0].id == "top"
    assert site.get_page("privacy").output == "privacy-policy.html"
