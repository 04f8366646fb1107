"""Default settings for record reading and writing."""

from pydantic import BaseModel, Field


class CellStyleSettings(BaseModel):
    """Cell style applied to every cell the writer produces."""

    align: str = "left"
    valign: str = "vcenter"
    # 1 is XlsxWriter's code for a thin continuous border
    border: int = 1

    def to_format_properties(self) -> dict[str, str | int]:
        """Return the style as XlsxWriter format properties."""
        return {
            "align": self.align,
            "valign": self.valign,
            "border": self.border,
        }


class Settings(BaseModel):
    """Library settings."""

    # Sheet name used when the caller does not supply one
    default_sheet_name: str = "Sheet1"

    # Timestamps are written as text in this format
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    # Returned for cells whose kind the engine reports but the codec does not know
    unrecognized_value: str = "[unrecognized]"

    cell_style: CellStyleSettings = Field(default_factory=CellStyleSettings)


settings = Settings()
