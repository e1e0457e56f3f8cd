import os
from dataclasses import dataclass

DEFAULT_MANAGEMENT_URL = "https://manage.kontent.ai/v2"
_DEMO_KEYS = {"", "demo", "demo-key"}


@dataclass(frozen=True)
class KontentConfig:
    environment_id: str = ""
    management_api_key: str = ""
    subscription_api_key: str | None = None
    subscription_id: str | None = None
    management_url: str = DEFAULT_MANAGEMENT_URL
    language: str | None = None
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "KontentConfig":
        return cls(
            environment_id=os.getenv("KONTENT_ENVIRONMENT_ID", ""),
            management_api_key=os.getenv("KONTENT_MANAGEMENT_API_KEY", ""),
            subscription_api_key=os.getenv("KONTENT_SUBSCRIPTION_API_KEY") or None,
            subscription_id=os.getenv("KONTENT_SUBSCRIPTION_ID") or None,
            management_url=os.getenv("KONTENT_MANAGEMENT_URL", DEFAULT_MANAGEMENT_URL).rstrip("/"),
            language=os.getenv("KONTENT_LANGUAGE") or None,
            timeout=float(os.getenv("KONTENT_TIMEOUT", "30")),
        )

    @property
    def demo_mode(self) -> bool:
        return self.management_api_key in _DEMO_KEYS

    @property
    def has_subscription_access(self) -> bool:
        if self.demo_mode:
            return True
        return bool(self.subscription_api_key and self.subscription_id)

    @property
    def environment_url(self) -> str:
        return f"{self.management_url}/projects/{self.environment_id}"

    @property
    def subscription_url(self) -> str | None:
        if not self.subscription_id:
            return None
        return f"{self.management_url}/subscriptions/{self.subscription_id}"
