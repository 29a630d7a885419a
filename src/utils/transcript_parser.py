"""
Parser for transcribed voice notes.

Turns free text such as "bad cramps today and feeling tired" into the
structured fields of a daily log.
"""
from dataclasses import dataclass, field
from typing import List

from src.services.constants import KNOWN_SYMPTOMS, KNOWN_MOODS

@dataclass
class ParsedTranscript:
    """
    Log fields extracted from a transcript.

    Attributes:
        text: Original transcript
        symptoms: Known symptoms mentioned, in catalog order
        mood: First known mood mentioned, empty if none
        notes: Text kept as the log note
    """
    text: str
    symptoms: List[str] = field(default_factory=list)
    mood: str = ""
    notes: str = ""

def parse_transcript(text: str) -> ParsedTranscript:
    """
    Extract symptoms and mood from a transcript.

    Matching is case-insensitive substring matching against the known lists.

    Example:
        >>> parsed = parse_transcript("Cramps and a headache, feeling tired")
        >>> parsed.symptoms, parsed.mood
        (['Cramps', 'Headache'], 'Tired')
    """
    text = (text or "").strip()
    lower = text.lower()

    symptoms = [s for s in KNOWN_SYMPTOMS if s.lower() in lower]
    mood = next((m for m in KNOWN_MOODS if m.lower() in lower), "")

    return ParsedTranscript(text=text, symptoms=symptoms, mood=mood, notes=text)
