from dataclasses import dataclass


@dataclass
class Settings:
    show_types: bool = True
    type_placeholder: str = "-"
    column_gap: int = 2
