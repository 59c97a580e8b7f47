"""Tests for cross-source track equality."""

from trackmatch.track import Track, ascii_lower, equals, parse


class TestEquals:

    def test_same_title(self):
        assert equals(parse("Sonartek - Maqueta"), parse("Sonartek - Maqueta"))

    def test_artist_order_ignored(self):
        a = parse("Sonartek & Gorbani - Otherside")
        b = parse("Gorbani, Sonartek - Otherside")
        assert equals(a, b)

    def test_case_ignored(self):
        a = parse("SONARTEK - MAQUETA (DUBBTONE Remix)")
        b = parse("sonartek - maqueta (dubbtone Remix)")
        assert equals(a, b)

    def test_catno_and_position_ignored(self):
        a = parse("A1. Vern - Eter [LKMV004]")
        b = parse("Vern - Eter")
        assert equals(a, b)

    def test_original_mix_matches_plain(self):
        a = parse("Sonartek & Gorbani - Otherside (Original Mix)")
        b = parse("Gorbani & Sonartek - Otherside")
        assert equals(a, b)

    def test_remixer_order_ignored(self):
        a = parse("Artist - Title (RemixerA & RemixerB Remix)")
        b = parse("Artist - Title (RemixerB & RemixerA Remix)")
        assert equals(a, b)

    def test_method_form(self):
        assert parse("Sonartek - Maqueta").matches(parse("sonartek - maqueta"))


class TestNotEquals:

    def test_different_name(self):
        assert not equals(parse("Sonartek - Maqueta"), parse("Sonartek - Otherside"))

    def test_different_artist(self):
        assert not equals(parse("Sonartek - Maqueta"), parse("Gorbani - Maqueta"))

    def test_extra_artist(self):
        a = parse("Sonartek - Maqueta")
        b = parse("Sonartek & Gorbani - Maqueta")
        assert not equals(a, b)
        assert not equals(b, a)

    def test_remix_vs_original(self):
        a = parse("Ted Amber - Terula (Barut Remix)")
        b = parse("Ted Amber - Terula")
        assert not equals(a, b)

    def test_different_remixer(self):
        a = parse("Ted Amber - Terula (Barut Remix)")
        b = parse("Ted Amber - Terula (Someone Remix)")
        assert not equals(a, b)


class TestBagContainment:
    """Counts are compared, then entries of ``a`` are looked up in ``b``."""

    def test_case_variants_count_separately(self):
        a = Track(name="T", artists=["X", "x"])
        b = Track(name="T", artists=["x", "Y"])
        assert equals(a, b)
        assert not equals(b, a)

    def test_empty_tracks(self):
        assert equals(Track(), Track())

    def test_non_ascii_case_is_not_folded(self):
        a = Track(name="Éter", artists=["Vern"])
        b = Track(name="éter", artists=["Vern"])
        assert not equals(a, b)


class TestAsciiLower:

    def test_ascii_only(self):
        assert ascii_lower("ABC def") == "abc def"
        assert ascii_lower("É") == "É"
