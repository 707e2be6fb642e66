from typing import List

from pydantic import BaseModel, Field, ConfigDict


class VocabEntry(BaseModel):
    """
    One stored word of a vocabulary table, as written to vocab.jsonl.

    - word: the surface string held under the ID
    - id: dense word ID (position in the table)
    - freq: observed count of the word
    """
    word: str = Field(..., description="The vocabulary word")
    id: int = Field(..., ge=0, description="Dense word ID")
    freq: int = Field(..., description="Observed frequency of the word")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "word": "rabbit",
                "id": 128,
                "freq": 51
            }
        }
    )


class VocabStats(BaseModel):
    """
    Aggregate statistics of a vocabulary table.

    - size: number of dense IDs
    - total_frequency: sum of all frequency increments
    - max_word_length: longest word in codepoints
    - aliases: extra keys left resolvable by renames
    """
    size: int = Field(..., ge=0, description="Number of dense IDs")
    total_frequency: int = Field(..., description="Sum of all frequency increments")
    max_word_length: int = Field(..., ge=0, description="Longest word in codepoints")
    aliases: int = Field(default=0, ge=0, description="Stale names kept resolvable after renames")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "size": 2715,
                "total_frequency": 26443,
                "max_word_length": 16,
                "aliases": 0
            }
        }
    )

    @classmethod
    def from_vocabulary(cls, vocab) -> "VocabStats":
        return cls(
            size=vocab.size(),
            total_frequency=vocab.total_frequency(),
            max_word_length=vocab.max_word_length(),
            aliases=len(vocab.ids) - len(set(vocab.words)),
        )

    def summary(self) -> str:
        """Generate a human-readable summary of the statistics."""
        lines = []
        lines.append("VOCABULARY SUMMARY")
        lines.append("=" * 40)
        lines.append(f"Vocabulary size: {self.size:,} words")
        lines.append(f"Total frequency: {self.total_frequency:,}")
        lines.append(f"Longest word: {self.max_word_length} codepoints")
        if self.aliases:
            lines.append(f"Renamed aliases: {self.aliases:,}")
        return "\n".join(lines)


class SplitRecord(BaseModel):
    """One segmented input line, as written by vocab2split."""
    text: str = Field(..., description="Original input string")
    words: List[str] = Field(default_factory=list, description="Most likely split of the lowercased input")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "WhiteRabbit",
                "words": ["white", "rabbit"]
            }
        }
    )
