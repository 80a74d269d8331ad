"""
Test suite for the prompt builder.

Covers the default Arabic / English prompts, the audience-size rule, the
salutation rule and custom template substitution.

Run with:
    pytest generation/tests/test_prompts.py -v
"""

import pytest

from generation.models import GenerationRequest, Language
from generation.prompts import (
    AUDIENCE_INSTRUCTIONS,
    ENGLISH_TITLES,
    SALUTATION_INSTRUCTIONS,
    audience_form,
    audience_instruction,
    build_prompt,
    fill_custom_template,
    translate_title,
)


DESCRIPTION = "ملف رقمي – تصميم صندوق تخزين بطاريات – متوافق مع CNC & Glowforge"
URL = "https://www.etsy.com/listing/987654321/battery-box"


def create_request(**overrides) -> GenerationRequest:
    values = {
        "product_description": DESCRIPTION,
        "product_url": URL,
        "language": Language.AR,
    }
    values.update(overrides)
    return GenerationRequest(**values)


def all_audience_texts(language: Language):
    return [text.split("{count}")[0] for text in AUDIENCE_INSTRUCTIONS[language].values()]


# ===================================================================
# TESTS - Default Path
# ===================================================================

@pytest.mark.parametrize("language", [Language.AR, Language.EN_US])
def test_default_prompt_contains_product_details(language):
    """Description and URL are embedded literally"""
    prompt = build_prompt(create_request(language=language))

    assert DESCRIPTION in prompt
    assert URL in prompt


def test_arabic_default_prompt_framing():
    """Role, market, CTA and output contract are always present"""
    prompt = build_prompt(create_request())

    assert "خبير تسويق عبر البريد الإلكتروني" in prompt
    assert "Etsy" in prompt
    assert "الأمريكية والأوروبية" in prompt
    assert "(CTA)" in prompt
    assert '"subject"' in prompt and '"body"' in prompt
    assert "JSON" in prompt
    assert "\\n" in prompt
    assert "Gmail" in prompt and "Outlook" in prompt
    assert "Arial" in prompt and "Tahoma" in prompt


def test_english_default_prompt_framing():
    prompt = build_prompt(create_request(language=Language.EN_US))

    assert prompt.startswith("You are an email marketing expert")
    assert "Etsy" in prompt
    assert "US and European markets" in prompt
    assert "professional, concise and persuasive" in prompt
    assert "call to action" in prompt
    assert 'Respond as JSON with exactly two keys: "subject" and "body"' in prompt
    assert 'use "\\n" for line breaks' in prompt
    assert "Gmail and Outlook" in prompt
    assert "Arial or Tahoma" in prompt


def test_language_accepts_plain_string():
    """'en-US' given as a string selects the English prompt"""
    prompt = build_prompt(create_request(language="en-US"))

    assert prompt.startswith("You are an email marketing expert")


def test_product_text_with_braces_is_kept_verbatim():
    """Braces in user text must not be treated as format fields"""
    description = "Sticker pack {limited} {{edition}} 100%"
    prompt = build_prompt(create_request(product_description=description))

    assert description in prompt


# ===================================================================
# TESTS - Audience Size
# ===================================================================

@pytest.mark.parametrize(
    "count,expected_form",
    [
        (None, None),
        (-3, None),
        (0, None),
        (1, "singular"),
        (2, "dual"),
        (3, "small_group"),
        (5, "small_group"),
        (10, "small_group"),
        (11, "large_audience"),
        (15, "large_audience"),
        (5000, "large_audience"),
    ],
)
def test_audience_form_thresholds(count, expected_form):
    assert audience_form(count) == expected_form


@pytest.mark.parametrize(
    "count,marker",
    [
        (1, "صيغة المفرد"),
        (2, "صيغة المثنى"),
        (5, "مجموعة صغيرة من 5 مستلمين"),
        (15, "جمهور كبير (15 مستلمًا)"),
    ],
)
def test_arabic_audience_instruction_variant(count, marker):
    """Each count gets exactly its own grammatical-number instruction"""
    prompt = build_prompt(create_request(recipient_count=count))
    expected = audience_instruction(count, Language.AR)

    assert expected in prompt
    assert marker in prompt

    # No other variant leaks in
    others = [
        text for form, text in AUDIENCE_INSTRUCTIONS[Language.AR].items()
        if form != audience_form(count)
    ]
    for other in others:
        assert other.split("{count}")[0] not in prompt


@pytest.mark.parametrize("count", [None, 0])
@pytest.mark.parametrize("language", [Language.AR, Language.EN_US])
def test_no_audience_instruction_without_recipients(count, language):
    prompt = build_prompt(create_request(recipient_count=count, language=language))

    for text in all_audience_texts(language):
        assert text not in prompt


@pytest.mark.parametrize(
    "count,marker",
    [
        (1, "single recipient"),
        (2, "two recipients"),
        (5, "small group of 5 recipients"),
        (15, "large audience (15 recipients)"),
    ],
)
def test_english_audience_instruction_variant(count, marker):
    prompt = build_prompt(create_request(language=Language.EN_US, recipient_count=count))

    assert audience_instruction(count, Language.EN_US) in prompt
    assert marker in prompt


def test_english_plural_forms_for_groups():
    """English degrades to singular vs plural address"""
    assert "singular" in audience_instruction(1, Language.EN_US)
    assert "plural" in audience_instruction(5, Language.EN_US)
    assert "plural" in audience_instruction(50, Language.EN_US)


# ===================================================================
# TESTS - Salutation
# ===================================================================

@pytest.mark.parametrize("arabic_title,english_title", sorted(ENGLISH_TITLES.items()))
def test_english_prompt_maps_known_titles(arabic_title, english_title):
    prompt = build_prompt(create_request(language=Language.EN_US, recipient_title=arabic_title))

    assert SALUTATION_INSTRUCTIONS[Language.EN_US].format(title=english_title) in prompt
    assert arabic_title not in prompt


@pytest.mark.parametrize(
    "arabic_title,english_title",
    [("السيد", "Mr."), ("الأستاذ", "Professor"), ("الدكتورة", "Dr.")],
)
def test_translate_title_examples(arabic_title, english_title):
    assert translate_title(arabic_title, Language.EN_US) == english_title


@pytest.mark.parametrize("title", ["Captain", "القبطان", "Mr."])
def test_unknown_title_passes_through(title):
    prompt = build_prompt(create_request(language=Language.EN_US, recipient_title=title))

    assert f'the title "{title}"' in prompt


def test_arabic_prompt_keeps_arabic_title():
    prompt = build_prompt(create_request(recipient_title="الدكتور"))

    assert SALUTATION_INSTRUCTIONS[Language.AR].format(title="الدكتور") in prompt
    assert "Dr." not in prompt


def test_title_is_stripped_before_lookup():
    assert translate_title("  السيدة ", Language.EN_US) == "Mrs."


@pytest.mark.parametrize("title", [None, "", "   "])
def test_no_salutation_without_title(title):
    prompt = build_prompt(create_request(language=Language.EN_US, recipient_title=title))

    assert "formal salutation" not in prompt


def test_audience_then_salutation_are_appended_last():
    prompt = build_prompt(create_request(recipient_count=2, recipient_title="السيد"))
    sections = prompt.split("\n\n")

    assert sections[-2] == audience_instruction(2, Language.AR)
    assert sections[-1] == SALUTATION_INSTRUCTIONS[Language.AR].format(title="السيد")


# ===================================================================
# TESTS - Custom Template
# ===================================================================

def test_custom_template_replaces_every_placeholder():
    template = (
        "Write about {{productDescription}}.\n"
        "Link: {{productUrl}}\n"
        "Again: {{productDescription}} / {{productUrl}}"
    )
    prompt = build_prompt(create_request(custom_prompt_template=template))

    assert prompt == (
        f"Write about {DESCRIPTION}.\n"
        f"Link: {URL}\n"
        f"Again: {DESCRIPTION} / {URL}"
    )
    assert "{{" not in prompt


def test_custom_template_ignores_audience_and_title():
    template = "Promote {{productDescription}} at {{productUrl}}"
    prompt = build_prompt(create_request(
        custom_prompt_template=template,
        recipient_count=15,
        recipient_title="الأستاذ",
        language=Language.EN_US,
    ))

    assert prompt == f"Promote {DESCRIPTION} at {URL}"


def test_custom_template_is_case_sensitive():
    template = "{{ProductDescription}} {{producturl}} {{ productUrl }}"

    assert fill_custom_template(template, DESCRIPTION, URL) == template


def test_custom_template_is_returned_verbatim():
    """Whitespace around the template is preserved"""
    template = "  \nNo placeholders here.\n  "

    assert build_prompt(create_request(custom_prompt_template=template)) == template


def test_custom_substitution_is_single_pass():
    """A description containing a placeholder token is not expanded again"""
    result = fill_custom_template("{{productDescription}}", "see {{productUrl}}", URL)

    assert result == "see {{productUrl}}"


@pytest.mark.parametrize("template", [None, "", "   \n\t"])
def test_blank_custom_template_uses_default_prompt(template):
    prompt = build_prompt(create_request(custom_prompt_template=template))

    assert prompt.startswith("أنت خبير تسويق")


# ===================================================================
# TESTS - Determinism
# ===================================================================

@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"language": Language.EN_US, "recipient_count": 7, "recipient_title": "السيدة"},
        {"recipient_count": 2, "recipient_title": "المهندس"},
        {"custom_prompt_template": "{{productUrl}} :: {{productDescription}}"},
    ],
)
def test_build_prompt_is_deterministic(overrides):
    first = build_prompt(create_request(**overrides))
    second = build_prompt(create_request(**overrides))

    assert first == second
    assert first.encode("utf-8") == second.encode("utf-8")
