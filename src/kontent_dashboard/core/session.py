from dataclasses import dataclass


@dataclass
class Session:
    """Per-session state shared by the resolver and the reconciler."""

    language_codename: str | None = None

    def override_language(self, codename: str | None) -> None:
        self.language_codename = codename
