"""PII anonymization."""

from collections.abc import Sequence
from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.exceptions import ValidationError
from llm_text.response import ResultShape, parse_structured_response
from llm_text.validation import validate_sequence, validate_text

PII_DESCRIPTIONS = {
    "names": "Names (personal names, full names, first names, last names)",
    "emails": "Email addresses",
    "phones": "Phone numbers (including various formats)",
    "addresses": "Physical addresses (street addresses, cities, postal codes)",
    "ssn": "Social Security Numbers",
    "credit_cards": "Credit card numbers",
}

DEFAULT_PII_TYPES = ("names", "emails", "phones", "addresses")
ALL_PII_TYPES = tuple(PII_DESCRIPTIONS)

REPLACEMENT_TOKENS = {
    "generic": {
        "names": "Names: [PERSON], [PERSON_1], [PERSON_2], etc. for multiple people",
        "emails": "Emails: [EMAIL], [EMAIL_1], [EMAIL_2], etc. for multiple emails",
        "phones": "Phones: [PHONE], [PHONE_1], [PHONE_2], etc.",
        "addresses": "Addresses: [ADDRESS], [ADDRESS_1], [ADDRESS_2], etc.",
        "ssn": "SSN: [SSN], [SSN_1], [SSN_2], etc.",
        "credit_cards": "Credit Cards: [CREDIT_CARD], [CREDIT_CARD_1], etc.",
    },
    "numbered": {
        "names": "Names: [PERSON_1], [PERSON_2], etc.",
        "emails": "Emails: [EMAIL_1], [EMAIL_2], etc.",
        "phones": "Phones: [PHONE_1], [PHONE_2], etc.",
        "addresses": "Addresses: [ADDRESS_1], [ADDRESS_2], etc.",
        "ssn": "SSN: [SSN_1], [SSN_2], etc.",
        "credit_cards": "Credit Cards: [CREDIT_CARD_1], [CREDIT_CARD_2], etc.",
    },
    "descriptive": {
        "names": "Names: [FIRST_NAME], [LAST_NAME], [FULL_NAME]",
        "emails": "Emails: [EMAIL_ADDRESS]",
        "phones": "Phones: [PHONE_NUMBER]",
        "addresses": "Addresses: [STREET_ADDRESS], [CITY], [POSTAL_CODE]",
        "ssn": "SSN: [SOCIAL_SECURITY_NUMBER]",
        "credit_cards": "Credit Cards: [CREDIT_CARD_NUMBER]",
    },
}

MAPPING_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "mapping": {"type": "object", "additionalProperties": {"type": "string"}},
    },
    "required": ["text", "mapping"],
}

MAPPING_SHAPE = ResultShape(text_field="text", defaults={"mapping": {}})


def anonymize(
    text: str,
    *,
    pii_types: Sequence[str] | str = DEFAULT_PII_TYPES,
    replacement_style: str = "generic",
    include_mapping: bool = False,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str | dict[str, Any]:
    """Replace personally identifiable information in `text` with tokens.

    Args:
        text: Text to anonymize.
        pii_types: PII categories to replace, or ``"all"``.
        replacement_style: ``generic``, ``numbered`` or ``descriptive``;
            unknown styles use ``generic``.
        include_mapping: Return ``{"text": ..., "mapping": {token: original}}``
            instead of the anonymized text alone.

    Raises:
        ValidationError: If `text` is blank or `pii_types` is empty or names
            an unknown category.
    """
    validate_text(text)
    types = resolve_pii_types(pii_types)
    prompt = build_prompt(
        text,
        pii_types=types,
        replacement_style=replacement_style,
        include_mapping=include_mapping,
    )

    if not include_mapping:
        return call_llm(prompt, operation="anonymize", model=model, config=config, **options)

    response = call_llm(
        prompt,
        operation="anonymize",
        model=model,
        schema=MAPPING_SCHEMA,
        config=config,
        **options,
    )
    return parse_structured_response(response, MAPPING_SHAPE)


def resolve_pii_types(pii_types: Sequence[str] | str) -> tuple[str, ...]:
    """Expand ``"all"`` and check every PII type is known."""
    if isinstance(pii_types, str):
        pii_types = [pii_types]
    requested = [str(t).lower() for t in validate_sequence(pii_types, "pii_types")]
    if "all" in requested:
        return ALL_PII_TYPES

    unknown = [t for t in requested if t not in PII_DESCRIPTIONS]
    if unknown:
        raise ValidationError(
            f"Unknown pii_types: {', '.join(unknown)}. "
            f"Must be among: all, {', '.join(ALL_PII_TYPES)}"
        )
    return tuple(dict.fromkeys(requested))


def build_prompt(
    text: str,
    *,
    pii_types: Sequence[str],
    replacement_style: str = "generic",
    include_mapping: bool = False,
) -> str:
    style = replacement_style if replacement_style in REPLACEMENT_TOKENS else "generic"
    tokens = REPLACEMENT_TOKENS[style]

    lines = [
        "Anonymize the following text by replacing personally identifiable "
        "information (PII) with replacement tokens.",
        "",
        "Identify and replace the following types of PII:",
    ]
    lines.extend(f"- {PII_DESCRIPTIONS[t]}" for t in pii_types)
    lines.append(f"Use {style} replacement tokens:")
    lines.extend(f"- {tokens[t]}" for t in pii_types)
    lines.append("")

    if include_mapping:
        lines.extend(
            [
                "Return a JSON object with:",
                '- "text": the anonymized text with PII replaced',
                '- "mapping": an object mapping each replacement token to its original value',
                "",
                "Example:",
                "{",
                '  "text": "Contact [PERSON_1] at [EMAIL_1]",',
                '  "mapping": {',
                '    "[PERSON_1]": "John Doe",',
                '    "[EMAIL_1]": "john.doe@example.com"',
                "  }",
                "}",
            ]
        )
    else:
        lines.extend(
            [
                "Return only the anonymized text with PII replaced by appropriate tokens.",
                "Do not include any explanation or notes.",
            ]
        )

    lines.extend(["", "Text:", text])
    return "\n".join(lines)
