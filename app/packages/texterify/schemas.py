"""Pydantic schemas for Texterify tools."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PROJECT_ID_DESCRIPTION = (
    "The Texterify project UUID. If omitted, TEXTERIFY_PROJECT_ID is used. "
    "The value is the 'project_id' field of the project's texterify.json file"
)

PLURAL_FORMS = ("zero", "one", "two", "few", "many")


class TextContent(BaseModel):
    """One text block of a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Tagged result of a tool invocation.

    Success carries the pretty-printed JSON payload, error carries a single
    human-readable message. Both are returned with HTTP 200.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": [{"type": "text", "text": "Error creating key: name: TAKEN"}],
                "is_error": True,
            }
        }
    )

    content: List[TextContent]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)


class ToolAnnotations(BaseModel):
    """Behaviour hints advertised with a tool."""

    read_only: bool = False
    destructive: bool = False
    idempotent: bool = False
    open_world: bool = True


class ToolDescriptor(BaseModel):
    """Public description of a registered tool."""

    name: str
    description: str
    annotations: ToolAnnotations
    input_schema: dict


class PaginationInput(BaseModel):
    page: Optional[int] = Field(
        None,
        ge=1,
        description="Page number, starting from 1. Use meta.total to compute the page count",
    )
    per_page: Optional[int] = Field(
        None,
        ge=1,
        le=50,
        description="Number of results per page (default: 10, max: 50)",
    )


class ListProjectsInput(PaginationInput):
    search: Optional[str] = Field(
        None, description="Filter projects by name (case-insensitive substring match)"
    )


class ProjectScopedInput(BaseModel):
    project_id: Optional[str] = Field(
        None, min_length=1, description=PROJECT_ID_DESCRIPTION
    )


class ListLanguagesInput(ProjectScopedInput, PaginationInput):
    search: Optional[str] = Field(
        None, description="Filter languages by name (case-insensitive substring match)"
    )


class ListKeysInput(ProjectScopedInput, PaginationInput):
    search: Optional[str] = Field(
        None,
        description="Filter keys by name, description or translation content "
        "(case-insensitive substring match)",
    )
    only_untranslated: Optional[bool] = Field(
        None,
        description="Return only keys missing a translation in at least one language",
    )


class GetKeyInput(ProjectScopedInput):
    key_id: str = Field(
        ..., min_length=1, description="UUID of the key (data[].id in list_keys)"
    )


class KeyAttributesInput(BaseModel):
    description: Optional[str] = Field(
        None,
        description="Context for translators, e.g. 'Greeting shown in the page header'. "
        "Metadata only, not a translation",
    )
    html_enabled: Optional[bool] = Field(
        None,
        description="True if translations of this key contain HTML markup (default: false)",
    )
    pluralization_enabled: Optional[bool] = Field(
        None,
        description="True if the key needs CLDR plural forms zero, one, two, few, many "
        "besides content (default: false)",
    )


KEY_NAME_DESCRIPTION = (
    "The key name used as the i18n identifier in source code, e.g. "
    "'welcome_message' or 'auth.login.title'. Must be unique within the project"
)


class CreateKeyInput(ProjectScopedInput, KeyAttributesInput):
    name: str = Field(..., min_length=1, description=KEY_NAME_DESCRIPTION)


class UpdateKeyInput(ProjectScopedInput, KeyAttributesInput):
    key_id: str = Field(..., min_length=1, description="UUID of the key to update")
    name: Optional[str] = Field(
        None, min_length=1, description="New key name. Omit to leave unchanged"
    )


class DeleteKeysInput(ProjectScopedInput):
    key_ids: List[str] = Field(
        ...,
        min_length=1,
        description="One or more key UUIDs. Keys and all their translations are "
        "permanently removed",
    )


class PluralFormsInput(BaseModel):
    content: str = Field(
        ...,
        min_length=1,
        description="The translated text. Also the 'other' plural form when "
        "pluralization is enabled on the key",
    )
    zero: Optional[str] = Field(None, description="CLDR plural form for zero quantity")
    one: Optional[str] = Field(
        None, description="CLDR plural form for singular quantity"
    )
    two: Optional[str] = Field(None, description="CLDR plural form for dual quantity")
    few: Optional[str] = Field(None, description="CLDR plural form for paucal quantity")
    many: Optional[str] = Field(None, description="CLDR plural form for many quantity")


class SetTranslationInput(ProjectScopedInput, PluralFormsInput):
    key_id: str = Field(..., min_length=1, description="UUID of the translation key")
    language_id: str = Field(
        ...,
        min_length=1,
        description="UUID of the target language (data[].id in list_languages)",
    )


class TranslationEntry(PluralFormsInput):
    """One requested translation, addressed by language code."""

    language_code: str = Field(
        ...,
        min_length=1,
        description="Language code such as 'en', 'de' or 'fr'; must be configured "
        "in the project",
    )


class CreateKeyWithTranslationsInput(ProjectScopedInput, KeyAttributesInput):
    name: str = Field(..., min_length=1, description=KEY_NAME_DESCRIPTION)
    translations: List[TranslationEntry] = Field(
        ...,
        min_length=1,
        description="Translations to set on the new key, applied in order",
    )
