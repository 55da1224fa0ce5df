"""
notation/schemas.py — Pydantic request/response schemas for spelling a measure.

Lets a collaborator that talks JSON (a web renderer, an editor plugin) hand
over a key plus notes and receive the spellings back.

Covers:
    SpellRequest    — key + notes in document order
    SpelledNoteOut  — one resolved note
    SpellResponse   — all resolved notes + how many need an accidental glyph
    spell_request() — run a SpellRequest through notation.sequence
"""

from pydantic import BaseModel, Field, field_validator

from notation.sequence import spell_notes_indexed


class SpellRequest(BaseModel):
    """Request body: spell ``notes`` in ``key``."""

    key: str = Field(..., min_length=1, max_length=8, description="Key signature, e.g. 'bb', 'f#m'")
    notes: list[str] = Field(..., min_length=1, description="Note spellings in document order")
    skip_invalid: bool = Field(
        default=False, description="Skip malformed notes instead of failing the request"
    )

    @field_validator("key")
    @classmethod
    def key_must_not_be_blank(cls, v: str) -> str:
        """Validate that key is not whitespace-only."""
        if not v.strip():
            raise ValueError("key must be a non-empty string")
        return v.strip()


class SpelledNoteOut(BaseModel):
    """A single resolved note.

    ``index`` is the note's position in the request, skipped notes included.
    """

    index: int = Field(..., ge=0)
    note: str
    accidental: str | None = None
    change: bool


class SpellResponse(BaseModel):
    """Response body for a spelled measure."""

    key: str
    notes: list[SpelledNoteOut]
    changed_count: int = Field(..., ge=0)


def spell_request(request: SpellRequest) -> SpellResponse:
    """Resolve a SpellRequest.

    Raises:
        MusicError: If the key is rejected, or a note is malformed and
            ``skip_invalid`` is False.
    """
    resolutions = spell_notes_indexed(
        request.key, request.notes, skip_invalid=request.skip_invalid
    )
    notes = [
        SpelledNoteOut(index=i, note=r.note, accidental=r.accidental, change=r.change)
        for i, r in resolutions
    ]
    return SpellResponse(
        key=request.key,
        notes=notes,
        changed_count=sum(1 for n in notes if n.change),
    )
