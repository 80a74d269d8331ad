"""
Email Generation Prompts

Builds the text sent to Gemini, either from a caller-supplied template or
from the built-in Arabic / English marketing prompt.

Everything here is a pure function of the GenerationRequest: the same
request always produces the same bytes.
"""

import re
from typing import Dict, Optional

from generation.models import GenerationRequest, Language


PLACEHOLDER_PATTERN = re.compile(r"\{\{(productDescription|productUrl)\}\}")


# ===================================================================
# DEFAULT PROMPTS
# ===================================================================

ARABIC_PROMPT = """أنت خبير تسويق عبر البريد الإلكتروني متخصص في المنتجات الرقمية لمنصة Etsy، وتستهدف العملاء في الأسواق الأمريكية والأوروبية.
مهمتك هي إنشاء بريد إلكتروني تسويقي احترافي، موجز، ومقنع باللغة العربية الفصحى.
يجب أن يحتوي البريد الإلكتروني على سطر عنوان (subject) جذاب ومحتوى (body) يتضمن دعوة واضحة لاتخاذ إجراء (CTA).
يجب أن تكون النبرة احترافية وودودة وجذابة. ركز على الفوائد الرئيسية للمنتج.

معلومات المنتج كالتالي:
- وصف المنتج: {product_description}
- رابط المنتج: {product_url}

يرجى تقديم المخرج بتنسيق JSON يحتوي على مفتاحين فقط: "subject" و "body". يجب أن يكون المحتوى نصًا واحدًا، ويمكنك استخدام "\\n" للأسطر الجديدة. يجب أن يكون المحتوى جاهزًا للإرسال ومصممًا ليتوافق مع جميع برامج البريد الإلكتروني الرئيسية مثل Gmail و Outlook. استخدم خطوطًا قياسية مثل Arial أو Tahoma."""

ENGLISH_PROMPT = """You are an email marketing expert specializing in digital products sold on Etsy, targeting customers in the US and European markets.
Your task is to write a professional, concise and persuasive marketing email in English.
The email must have a catchy subject line (subject) and a body (body) that includes a clear call to action (CTA).
The tone should be professional, friendly and engaging. Focus on the key benefits of the product.

Product information:
- Product description: {product_description}
- Product URL: {product_url}

Respond as JSON with exactly two keys: "subject" and "body". The body must be a single text value; use "\\n" for line breaks. The content must be ready to send and render correctly in all mainstream email clients such as Gmail and Outlook. Use widely supported fonts such as Arial or Tahoma."""

DEFAULT_PROMPTS: Dict[Language, str] = {
    Language.AR: ARABIC_PROMPT,
    Language.EN_US: ENGLISH_PROMPT,
}


# ===================================================================
# AUDIENCE SIZE (GRAMMATICAL NUMBER)
# ===================================================================

SMALL_GROUP_MAX = 10

AUDIENCE_INSTRUCTIONS: Dict[Language, Dict[str, str]] = {
    Language.AR: {
        "singular": "الرسالة موجهة إلى مستلم واحد فقط. استخدم صيغة المفرد في المخاطبة، واجعل النبرة شخصية ومباشرة.",
        "dual": "الرسالة موجهة إلى مستلمَين اثنين. استخدم صيغة المثنى في المخاطبة (مثل: أنتما، لكما، يسعدنا أن نقدم لكما).",
        "small_group": "الرسالة موجهة إلى مجموعة صغيرة من {count} مستلمين. استخدم صيغة الجمع في المخاطبة (مثل: أنتم، لكم) مع الحفاظ على نبرة قريبة وودودة.",
        "large_audience": "الرسالة موجهة إلى جمهور كبير ({count} مستلمًا). استخدم صيغة الجمع العامة المناسبة لجمهور واسع، وتجنب المخاطبة الشخصية المباشرة.",
    },
    Language.EN_US: {
        "singular": "This email is addressed to a single recipient. Use singular, second-person address with a personal, direct tone.",
        "dual": "This email is addressed to two recipients. Address both of them directly in the second person (e.g. \"both of you\"), keeping a personal tone.",
        "small_group": "This email is addressed to a small group of {count} recipients. Use plural address (e.g. \"all of you\") with a warm, close tone.",
        "large_audience": "This email is addressed to a large audience ({count} recipients). Use a general plural form suited to a broad audience and avoid overly personal address.",
    },
}


def audience_form(recipient_count: Optional[int]) -> Optional[str]:
    """
    Map a recipient count to a grammatical-number form.

    None or <= 0 -> None (no instruction)
    1 -> singular, 2 -> dual, 3..10 -> small_group, > 10 -> large_audience
    """
    if recipient_count is None or recipient_count <= 0:
        return None
    if recipient_count == 1:
        return "singular"
    if recipient_count == 2:
        return "dual"
    if recipient_count <= SMALL_GROUP_MAX:
        return "small_group"
    return "large_audience"


def audience_instruction(recipient_count: Optional[int], language: Language) -> Optional[str]:
    form = audience_form(recipient_count)
    if form is None:
        return None
    return AUDIENCE_INSTRUCTIONS[language][form].format(count=recipient_count)


# ===================================================================
# SALUTATION
# ===================================================================

# Arabic title -> English salutation title. Unlisted titles are used as given.
ENGLISH_TITLES: Dict[str, str] = {
    "السيد": "Mr.",
    "السيدة": "Mrs.",
    "الآنسة": "Ms.",
    "الدكتور": "Dr.",
    "الدكتورة": "Dr.",
    "د.": "Dr.",
    "الأستاذ": "Professor",
    "الأستاذة": "Professor",
    "البروفيسور": "Professor",
    "الأستاذ الدكتور": "Professor",
    "المهندس": "Eng.",
    "المهندسة": "Eng.",
    "الشيخ": "Sheikh",
}

SALUTATION_INSTRUCTIONS: Dict[Language, str] = {
    Language.AR: "ابدأ البريد الإلكتروني بتحية رسمية تستخدم اللقب \"{title}\" (مثال: \"عزيزي {title}،\").",
    Language.EN_US: "Open the email with a formal salutation using the title \"{title}\" (e.g. \"Dear {title} ...,\").",
}


def translate_title(title: str, language: Language) -> str:
    """Return the title to use in the salutation for the given language."""
    title = title.strip()
    if language == Language.EN_US:
        return ENGLISH_TITLES.get(title, title)
    return title


def salutation_instruction(recipient_title: Optional[str], language: Language) -> Optional[str]:
    if not recipient_title or not recipient_title.strip():
        return None
    return SALUTATION_INSTRUCTIONS[language].format(
        title=translate_title(recipient_title, language)
    )


# ===================================================================
# PROMPT ASSEMBLY
# ===================================================================

def fill_custom_template(template: str, product_description: str, product_url: str) -> str:
    """
    Substitute {{productDescription}} and {{productUrl}} in a single pass.

    Text inserted for one placeholder is never scanned again, so a product
    description that itself contains "{{productUrl}}" is kept literally.
    """
    values = {
        "productDescription": product_description,
        "productUrl": product_url,
    }
    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], template)


def build_prompt(request: GenerationRequest) -> str:
    """
    Build the prompt text for a generation request.

    A non-blank custom template wins and is returned with only its
    placeholders replaced. Otherwise the built-in prompt for the request's
    language is used, followed by the audience and salutation instructions
    when they apply.

    Args:
        request: Product, audience and language details

    Returns:
        Prompt text sent to Gemini
    """
    if request.has_custom_template:
        return fill_custom_template(
            request.custom_prompt_template,
            request.product_description,
            request.product_url,
        )

    language = Language(request.language)
    sections = [
        DEFAULT_PROMPTS[language].format(
            product_description=request.product_description,
            product_url=request.product_url,
        )
    ]

    audience = audience_instruction(request.recipient_count, language)
    if audience:
        sections.append(audience)

    salutation = salutation_instruction(request.recipient_title, language)
    if salutation:
        sections.append(salutation)

    return "\n\n".join(sections)
