"""Unit tests for the SEO doctor field validators."""

import pytest
from seodoctor.protocols import Status
from seodoctor.validators import (
    count_items,
    has_number,
    has_text,
    is_set,
    validate_article_og_tags,
    validate_article_twitter_cards,
    validate_canonical_url,
    validate_image_alt,
    validate_og_image_alt,
    validate_og_image_dimensions,
    validate_og_tags,
    validate_seo_description,
    validate_seo_title,
    validate_slug,
    validate_twitter_cards,
    validate_url,
)
from seodoctor.validators import article, author, organization, taxonomy


class TestPresencePredicates:
    """Test the loose presence checks shared by every validator."""

    def test_has_text_requires_non_blank_string(self):
        """Whitespace-only and non-string values are absent."""
        assert has_text("x")
        assert not has_text("   ")
        assert not has_text(None)
        assert not has_text(42)

    def test_has_number_rejects_zero_and_bools(self):
        """Zero, NaN and booleans do not count as numbers."""
        assert has_number(1200)
        assert has_number(0.5)
        assert not has_number(0)
        assert not has_number(True)
        assert not has_number(float("nan"))
        assert not has_number("1200")

    def test_is_set_treats_empty_collections_as_set(self):
        """Lists and mappings are set even when empty, like JavaScript truthiness."""
        assert is_set([])
        assert is_set({})
        assert not is_set("")
        assert not is_set(0)
        assert not is_set(False)

    def test_count_items_ignores_non_lists(self):
        """Only lists and tuples have a length here."""
        assert count_items(["a", "b"]) == 2
        assert count_items("abc") == 0
        assert count_items(None) == 0


class TestSeoTitle:
    """Test SEO title length banding."""

    @pytest.mark.parametrize(
        "length, status, score",
        [
            (55, Status.PASS, 15),
            (50, Status.PASS, 15),
            (60, Status.PASS, 15),
            (30, Status.WARNING, 10),
            (49, Status.WARNING, 10),
            (61, Status.WARNING, 12),
            (70, Status.WARNING, 12),
            (71, Status.WARNING, 8),
            (29, Status.FAIL, 5),
            (1, Status.FAIL, 5),
        ],
    )
    def test_title_bands(self, length, status, score):
        """Each length lands in the expected band."""
        result = validate_seo_title("t" * length, {})
        assert result.status is status
        assert result.score == score
        assert f"({length} chars)" in result.message

    def test_missing_title_fails_with_zero(self):
        """A missing title scores nothing."""
        result = validate_seo_title(None, {})
        assert result.status is Status.FAIL
        assert result.score == 0
        assert result.message == "SEO title is missing - critical for search visibility"

    def test_non_string_title_is_missing(self):
        """Wrong types never raise."""
        assert validate_seo_title(12345, {}).score == 0


class TestSeoDescription:
    """Test SEO description length banding."""

    @pytest.mark.parametrize(
        "length, status, score",
        [
            (150, Status.PASS, 15),
            (160, Status.PASS, 15),
            (120, Status.WARNING, 12),
            (149, Status.WARNING, 12),
            (161, Status.WARNING, 10),
            (180, Status.WARNING, 10),
            (181, Status.WARNING, 8),
            (119, Status.FAIL, 5),
        ],
    )
    def test_description_bands(self, length, status, score):
        """Each length lands in the expected band."""
        result = validate_seo_description("d" * length, {})
        assert (result.status, result.score) == (status, score)

    def test_missing_description(self):
        """A blank description fails with zero points."""
        result = validate_seo_description("  ", {})
        assert (result.status, result.score) == (Status.FAIL, 0)


class TestImageChecks:
    """Test alt text and Open Graph image dimensions."""

    def test_alt_text_not_needed_without_parent_image(self):
        """Alt text is informational when there is no image."""
        result = validate_og_image_alt(None, {})
        assert result.status is Status.INFO
        assert result.score == 0

    def test_alt_text_required_with_parent_image(self):
        """An image without alt text fails."""
        data = {"og_image": "https://example.com/og.jpg"}
        assert validate_og_image_alt(None, data).status is Status.FAIL
        assert validate_og_image_alt("Alt", data).score == 5

    def test_image_alt_looks_at_image_field(self):
        """The generic alt validator keys off ``image``."""
        assert validate_image_alt("Alt", {"featured_image_id": "m1"}).status is Status.INFO
        assert validate_image_alt("Alt", {"image": "https://example.com/a.jpg"}).status is Status.PASS

    @pytest.mark.parametrize(
        "width, height, status, score",
        [
            (1200, 630, Status.PASS, 5),
            (800, 420, Status.WARNING, 3),
            (600, 314, Status.WARNING, 3),
            (599, 314, Status.WARNING, 2),
            (1200, None, Status.WARNING, 1),
            (None, None, Status.WARNING, 0),
        ],
    )
    def test_dimensions(self, width, height, status, score):
        """Optimal, acceptable, small, partial and missing dimensions."""
        data = {"og_image": "https://example.com/og.jpg", "og_image_width": width, "og_image_height": height}
        result = validate_og_image_dimensions(width, data)
        assert (result.status, result.score) == (status, score)

    def test_dimensions_message_formats_whole_floats(self):
        """Float dimensions from JSON are shown without a trailing ``.0``."""
        data = {"og_image": "x.jpg", "og_image_width": 800.0, "og_image_height": 420.0}
        assert "(800x420px)" in validate_og_image_dimensions(800.0, data).message

    def test_dimensions_without_image_are_info(self):
        """No OG image means nothing to measure."""
        result = validate_og_image_dimensions(1200, {"og_image_width": 1200, "og_image_height": 630})
        assert result.status is Status.INFO


class TestOpenGraphCoverage:
    """Test Open Graph tag completeness."""

    BASE = {
        "seo_title": "Title",
        "seo_description": "Description",
        "url": "https://example.com",
        "og_image": "https://example.com/og.jpg",
    }

    def test_essentials_only(self):
        """Title, description, url and image earn 10."""
        result = validate_og_tags(None, dict(self.BASE))
        assert (result.status, result.score) == (Status.PASS, 10)

    def test_essentials_with_alt(self):
        """Alt text lifts the score to 12."""
        assert validate_og_tags(None, {**self.BASE, "og_image_alt": "Alt"}).score == 12

    def test_essentials_with_dimensions(self):
        """Both dimensions lift the score to 12."""
        data = {**self.BASE, "og_image_width": 1200, "og_image_height": 630}
        assert validate_og_tags(None, data).score == 12

    def test_complete(self):
        """Alt text and both dimensions earn 15."""
        data = {**self.BASE, "og_image_alt": "Alt", "og_image_width": 1200, "og_image_height": 630}
        result = validate_og_tags(None, data)
        assert result.score == 15
        assert result.message.endswith("Complete with alt text and dimensions")

    def test_partial_lists_missing_tags(self):
        """A partial set warns with a partial score and names the missing tags."""
        data = {"seo_title": "Title", "og_image": "https://example.com/og.jpg", "og_image_width": 1200}
        result = validate_og_tags(None, data)
        assert result.status is Status.WARNING
        # title 3 + image 2 + width 1
        assert result.score == 6
        assert "og:description" in result.message
        assert "og:url" in result.message
        assert "og:image:alt" in result.message
        assert "og:image:height" in result.message
        assert "og:image:width" not in result.message

    def test_article_flavour_uses_featured_image_and_skips_url(self):
        """Articles have no ``url`` and may rely on the featured image."""
        data = {"seo_title": "Title", "seo_description": "Description", "featured_image_id": "m1"}
        result = validate_article_og_tags(None, data)
        assert (result.status, result.score) == (Status.PASS, 10)


class TestTwitterCards:
    """Test Twitter card configuration."""

    CONFIGURED = {
        "twitter_card": "summary_large_image",
        "twitter_title": "Title",
        "twitter_description": "Description",
        "twitter_image": "https://example.com/t.jpg",
    }

    def test_configured_with_and_without_alt(self):
        """Configured cards score 10, or 15 with image alt text."""
        assert validate_twitter_cards(None, dict(self.CONFIGURED)).score == 10
        assert validate_twitter_cards(None, {**self.CONFIGURED, "twitter_image_alt": "Alt"}).score == 15

    def test_auto_generatable(self):
        """SEO fields plus an OG image can feed the cards."""
        data = {"seo_title": "T", "seo_description": "D", "og_image": "https://example.com/og.jpg"}
        result = validate_twitter_cards(None, data)
        assert (result.status, result.score) == (Status.WARNING, 5)

    def test_article_cards_accept_featured_image(self):
        """Only the article flavour falls back to the featured image."""
        data = {"seo_title": "T", "seo_description": "D", "featured_image_id": "m1"}
        assert validate_twitter_cards(None, data).score == 0
        assert validate_article_twitter_cards(None, data).score == 5


class TestUrls:
    """Test slug, canonical and site URL checks."""

    def test_slug(self):
        assert validate_slug("my-slug", {}).score == 5
        assert validate_slug("", {}).status is Status.FAIL

    @pytest.mark.parametrize(
        "value, status, score",
        [
            ("https://example.com/page", Status.PASS, 5),
            ("http://example.com", Status.PASS, 5),
            ("/relative/path", Status.WARNING, 0),
            (None, Status.WARNING, 0),
        ],
    )
    def test_canonical(self, value, status, score):
        result = validate_canonical_url(value, {})
        assert (result.status, result.score) == (status, score)

    def test_site_url(self):
        """A full URL earns 10, anything else textual 5."""
        assert validate_url("https://example.com", {}).score == 10
        assert validate_url("example", {}).score == 5
        assert validate_url(None, {}).score == 0


class TestOrganizationValidators:
    """Test organization-specific rules."""

    @pytest.mark.parametrize(
        "count, status, score",
        [(3, Status.PASS, 10), (2, Status.PASS, 8), (1, Status.WARNING, 5), (0, Status.WARNING, 0)],
    )
    def test_social_profiles(self, count, status, score):
        profiles = [f"https://social{i}.example.com" for i in range(count)]
        result = organization.validate_social_profiles(profiles, {})
        assert (result.status, result.score) == (status, score)

    def test_business_brief(self):
        """Short briefs warn with nothing, missing briefs fail."""
        assert organization.validate_business_brief("b" * 100, {}).score == 10
        short = organization.validate_business_brief("b" * 99, {})
        assert (short.status, short.score) == (Status.WARNING, 0)
        assert organization.validate_business_brief(None, {}).status is Status.FAIL

    def test_brief_threshold_uses_stripped_text(self):
        """Padding does not count towards the 100 characters."""
        result = organization.validate_business_brief("  " + "b" * 98 + "  ", {})
        assert result.status is Status.WARNING
        assert "(102 chars)" in result.message

    def test_contact_info(self):
        assert organization.validate_contact_info(None, {"email": "a@b.c", "phone": "1"}).score == 10
        assert organization.validate_contact_info(None, {"phone": "1"}).score == 5
        assert organization.validate_contact_info(None, {}).score == 0

    def test_gtm_id(self):
        assert organization.validate_gtm_id("GTM-AB12", {}).score == 5
        assert organization.validate_gtm_id("gtm-ab12", {}).status is Status.WARNING
        assert organization.validate_gtm_id(None, {}).status is Status.INFO

    def test_https(self):
        assert organization.validate_https(None, {"url": "HTTPS://example.com"}).score == 5
        assert organization.validate_https(None, {"url": "http://example.com"}).status is Status.WARNING
        assert organization.validate_https(None, {}).status is Status.INFO

    def test_contact_point(self):
        assert organization.validate_contact_point("sales", {"contact_type": "sales", "email": "a@b.c"}).score == 5
        assert organization.validate_contact_point(None, {"email": "a@b.c"}).score == 2
        assert organization.validate_contact_point(None, {}).score == 0

    @pytest.mark.parametrize(
        "data, status, score",
        [
            ({"logo": "https://x.com/logo.SVG", "logo_alt": "Logo"}, Status.PASS, 8),
            ({"logo": "https://x.com/logo.webp"}, Status.PASS, 5),
            ({"logo": "https://x.com/logo.gif"}, Status.WARNING, 2),
            ({}, Status.WARNING, 0),
        ],
    )
    def test_logo_format(self, data, status, score):
        result = organization.validate_logo_format(data.get("logo"), data)
        assert (result.status, result.score) == (status, score)

    def test_address(self):
        full = {"address_street": "s", "address_city": "c", "address_country": "SA"}
        assert organization.validate_address(None, full).score == 5
        assert organization.validate_address(None, {"address_city": "c"}).score == 2
        assert organization.validate_address(None, {}).status is Status.INFO


class TestArticleValidators:
    """Test article-specific rules."""

    @pytest.mark.parametrize(
        "words, status, score",
        [(300, Status.PASS, 10), (200, Status.WARNING, 5), (5, Status.WARNING, 2)],
    )
    def test_content_word_count(self, words, status, score):
        result = article.validate_content(" ".join(["w"] * words), {})
        assert (result.status, result.score) == (status, score)

    def test_missing_content_fails(self):
        assert article.validate_content("", {}).status is Status.FAIL

    def test_featured_image(self):
        """Image with alt passes, without alt fails with 5, none warns."""
        with_alt = {"featured_image_id": "m1", "featured_image_alt": "Alt"}
        assert article.validate_featured_image("m1", with_alt).score == 10
        no_alt = article.validate_featured_image("m1", {"featured_image_id": "m1"})
        assert (no_alt.status, no_alt.score) == (Status.FAIL, 5)
        assert article.validate_featured_image(None, {}).status is Status.WARNING

    def test_date_published_only_checked_when_published(self):
        assert article.validate_date_published(None, {"status": "DRAFT"}).status is Status.INFO
        assert article.validate_date_published(None, {"status": "PUBLISHED"}).status is Status.FAIL
        assert article.validate_date_published("2024-01-01", {"status": "PUBLISHED"}).score == 10


class TestAuthorValidators:
    """Test author-specific rules."""

    def test_eeat_strong(self):
        """Four signals pass, capped at 15 points."""
        data = {
            "job_title": "Editor",
            "credentials": ["PhD"],
            "qualifications": ["Certified"],
            "expertise_areas": ["SEO"],
            "verification_status": True,
        }
        result = author.validate_eeat("Editor", data)
        assert result.status is Status.PASS
        assert result.score == 15

    def test_eeat_partial(self):
        """Two signals warn with their summed points."""
        result = author.validate_eeat(None, {"job_title": "Editor", "credentials": ["PhD"]})
        assert (result.status, result.score) == (Status.WARNING, 5)
        assert "job title, credentials" in result.message

    def test_eeat_weak(self):
        assert author.validate_eeat(None, {"job_title": "Editor"}).score == 0

    def test_social_counts_networks_and_same_as(self):
        data = {"linked_in": "https://linkedin.com/in/a", "same_as": ["https://a.example.com"]}
        assert author.validate_social(None, data).score == 8

    def test_bio(self):
        assert author.validate_bio("b" * 100, {}).score == 10
        assert author.validate_bio("short", {}).score == 5
        assert author.validate_bio(None, {}).status is Status.WARNING


class TestTaxonomyValidators:
    """Test category, tag and industry rules."""

    def test_name_messages_follow_kind(self):
        assert taxonomy.taxonomy_name("Tag")("seo", {}).message == "Tag name is set"
        assert taxonomy.taxonomy_name("Industry")(None, {}).status is Status.FAIL

    def test_category_description_is_required_wording(self):
        """Categories word the missing description as required but score it the same."""
        result = taxonomy.taxonomy_description("Category", required=True)(None, {})
        assert result.status is Status.WARNING
        assert "required" in result.message
        assert "recommended" in taxonomy.taxonomy_description("Tag")(None, {}).message
