from dataclasses import asdict, dataclass


@dataclass
class LookupResult:
    """Result of looking up a LaserDisc on lddb.com."""
    upc: str
    title: str = ""
    year: int = 0
    director: str = ""
    genre: str = ""
    format: str = ""
    sides: int = 0
    runtime: int = 0
    cover_image_url: str = ""
    lddb_url: str = ""
    found: bool = False
    error: str = ""

    def to_dict(self) -> dict:
        data = asdict(self)
        if not self.error:
            del data["error"]
        return data
