from typing import Literal

from pydantic_settings import BaseSettings

NotificationPolicy = Literal["best_effort", "fail_fast"]


class Settings(BaseSettings):
    accepted_payment_methods: list[str] = ["credit", "paypal", "bank"]
    notification_policy: NotificationPolicy = "best_effort"  # fail_fast: first subscriber error aborts fan-out
    customer_name: str = "Customer"
    log_level: str = "INFO"
    metrics_port: int | None = None  # demo entry point exposes /metrics when set

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
