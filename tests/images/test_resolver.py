"""Tests for catalog_site/images/resolver.py"""

import re
import time
from unittest.mock import MagicMock, patch

import pytest
import requests

from catalog_site.common.config_loader import ImageSettings
from catalog_site.images import (
    ImageProber,
    ManifestImageResolver,
    ProbeImageResolver,
    get_resolver,
)

CDN = "https://cdn.example.com/img/"


def probe_settings(**overrides):
    values = {"strategy": "probe", "manifest": None, "base_path": CDN}
    values.update(overrides)
    return ImageSettings(**values)


def head_session(existing):
    """Session whose HEAD succeeds only for URLs in `existing`."""
    session = MagicMock()

    def head(url, **kwargs):
        response = MagicMock()
        response.ok = url in existing
        return response

    session.head.side_effect = head
    return session


class FakeProber:
    """Prober answering from a set of URLs; optionally slow for low indices."""

    def __init__(self, existing, stagger=False):
        self.existing = set(existing)
        self.stagger = stagger
        self.calls = []

    def exists(self, url):
        self.calls.append(url)
        if self.stagger:
            match = re.search(r"-(\d+)\.", url)
            if match:
                time.sleep(0.02 * (6 - int(match.group(1))))
        return url in self.existing


class TestManifestImageResolver:
    def test_stops_at_first_gap(self, sample_manifest):
        resolver = ManifestImageResolver(sample_manifest)
        # 7-2 is missing, so 7-3 is never shown
        assert resolver.resolve("7").images == ("images/7.webp", "images/7-1.webp")

    def test_full_prefix(self, sample_manifest):
        resolver = ManifestImageResolver(sample_manifest)
        assert resolver.resolve("1").images == (
            "images/1.webp", "images/1-1.webp", "images/1-2.webp",
        )

    def test_missing_main_image_gives_placeholder(self):
        resolver = ManifestImageResolver({"9-1.webp", "9-2.webp"})
        gallery = resolver.resolve("9")
        assert gallery.images == ("images/placeholder.svg",)
        assert gallery.is_placeholder

    def test_empty_id_gives_placeholder(self, sample_manifest):
        assert ManifestImageResolver(sample_manifest).resolve("  ").is_placeholder

    def test_at_most_five_additional(self):
        manifest = {"5.webp"} | {f"5-{i}.webp" for i in range(1, 9)}
        gallery = ManifestImageResolver(manifest).resolve("5")
        assert len(gallery) == 6
        assert gallery.images[-1] == "images/5-5.webp"

    def test_main_image_first(self, sample_manifest):
        gallery = ManifestImageResolver(sample_manifest).resolve("1")
        assert gallery.main_image == "images/1.webp"

    def test_id_prefix_does_not_match_other_products(self):
        gallery = ManifestImageResolver({"1.webp", "11.webp", "1-1.webp"}).resolve("11")
        assert gallery.images == ("images/11.webp",)

    def test_extension_order(self):
        settings = ImageSettings(extensions=("webp", "jpg"))
        resolver = ManifestImageResolver({"3.jpg", "3.webp", "3-1.jpg"}, settings)
        assert resolver.resolve("3").images == ("images/3.webp", "images/3-1.jpg")

    def test_custom_base_path(self):
        settings = ImageSettings(base_path=CDN)
        assert ManifestImageResolver({"7.webp"}, settings).resolve("7").images == (CDN + "7.webp",)


class TestImageProber:
    def test_head_ok(self):
        prober = ImageProber(session=head_session({CDN + "7.webp"}))
        assert prober.exists(CDN + "7.webp")
        assert not prober.exists(CDN + "8.webp")

    def test_request_error_counts_as_missing(self):
        session = MagicMock()
        session.head.side_effect = requests.exceptions.Timeout("slow")
        assert not ImageProber(session=session, timeout=2).exists(CDN + "7.webp")
        session.head.assert_called_once_with(CDN + "7.webp", timeout=2, allow_redirects=True)

    def test_local_file(self, catalog_root):
        prober = ImageProber(root=catalog_root)
        assert prober.exists("images/7.webp")
        assert not prober.exists("images/7-2.webp")

    def test_closes_own_session(self):
        with patch("catalog_site.images.resolver.create_session") as mock_create:
            prober = ImageProber()
            prober.close()
        mock_create.return_value.close.assert_called_once()

    def test_leaves_shared_session_open(self):
        session = MagicMock()
        ImageProber(session=session).close()
        session.close.assert_not_called()

    def test_resolver_close_closes_prober(self):
        prober = MagicMock()
        ProbeImageResolver(prober, probe_settings()).close()
        prober.close.assert_called_once()


class TestProbeImageResolver:
    def test_same_rule_as_manifest(self):
        existing = {CDN + "7.webp", CDN + "7-1.webp", CDN + "7-3.webp"}
        resolver = ProbeImageResolver(ImageProber(session=head_session(existing)), probe_settings())
        assert resolver.resolve("7").images == (CDN + "7.webp", CDN + "7-1.webp")

    def test_missing_main_skips_additional_probes(self):
        prober = FakeProber({CDN + "9-1.webp"})
        gallery = ProbeImageResolver(prober, probe_settings()).resolve("9")
        assert gallery.is_placeholder
        assert prober.calls == [CDN + "9.webp"]

    def test_out_of_order_completion_keeps_index_order(self):
        existing = {CDN + "4.webp"} | {f"{CDN}4-{i}.webp" for i in range(1, 6)}
        prober = FakeProber(existing, stagger=True)
        gallery = ProbeImageResolver(prober, probe_settings()).resolve("4")
        assert gallery.images == tuple([CDN + "4.webp"] + [f"{CDN}4-{i}.webp" for i in range(1, 6)])

    def test_network_errors_end_gallery(self):
        session = head_session({CDN + "2.webp", CDN + "2-1.webp", CDN + "2-3.webp"})
        original = session.head.side_effect

        def flaky(url, **kwargs):
            if url.endswith("2-2.webp"):
                raise requests.exceptions.ConnectionError("reset")
            return original(url, **kwargs)

        session.head.side_effect = flaky
        resolver = ProbeImageResolver(ImageProber(session=session), probe_settings())
        assert resolver.resolve("2").images == (CDN + "2.webp", CDN + "2-1.webp")

    def test_local_probe(self, catalog_root):
        prober = ImageProber(root=catalog_root)
        resolver = ProbeImageResolver(prober, probe_settings(base_path="images/"))
        assert resolver.resolve("1").images == ("images/1.webp", "images/1-1.webp", "images/1-2.webp")


class TestGetResolver:
    def test_manifest_strategy(self, sample_manifest):
        assert isinstance(get_resolver(ImageSettings(), manifest=sample_manifest), ManifestImageResolver)

    def test_manifest_strategy_without_manifest(self):
        with pytest.raises(ValueError):
            get_resolver(ImageSettings())

    def test_probe_strategy(self, tmp_path):
        resolver = get_resolver(probe_settings(probe_timeout=3), root=tmp_path)
        assert isinstance(resolver, ProbeImageResolver)
        assert resolver.prober.timeout == 3
        assert resolver.prober.root == tmp_path
