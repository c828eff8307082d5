"""Package data classes produced by the parsers."""

from dataclasses import dataclass, field


ACTOR_KEY = "ACTOR"


@dataclass(slots=True)
class ExportDescriptor:
    """One entry of the .uasset export table.

    None of these fields are needed to reach the text lines; they are parsed
    so the table is validated and the cursor stays aligned.
    """
    class_index: int
    super_index: int
    template_index: int
    package_index: int
    object_name: str
    object_flags: int
    serial_size: int       # size of the export data (in the .uexp)
    serial_offset: int     # position of the export data
    is_forced_export: bool
    is_not_for_client: bool
    is_not_for_server: bool
    guid: bytes            # 16 opaque bytes
    package_flags: int
    is_not_for_editor_game: bool
    is_asset: bool


@dataclass(slots=True)
class TextRecord:
    """A single dialogue line from a .uexp file.

    Most lines carry exactly one attribute, ACTOR (the speaker). A few files
    such as US/Resident_TxtRes also carry ARTICLE, PLURAL, SINGULAR, ...
    """
    id: str
    text: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def actor(self) -> str:
        return self.attributes.get(ACTOR_KEY, "")
