from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"

    # required: without these no security or delivery guarantee holds
    razorpay_webhook_secret: SecretStr | None = None
    resend_api_key: SecretStr | None = None
    mail_from: str | None = None

    # optional (testing): used when the payload carries no buyer email
    fallback_to_email: str | None = None

    resend_api_url: str = "https://api.resend.com/emails"
    resend_timeout_sec: int = 10

    slack_webhook_url: SecretStr | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_required(self) -> list[str]:
        missing: list[str] = []
        if not self.razorpay_webhook_secret or not self.razorpay_webhook_secret.get_secret_value():
            missing.append("RAZORPAY_WEBHOOK_SECRET")
        if not self.resend_api_key or not self.resend_api_key.get_secret_value():
            missing.append("RESEND_API_KEY")
        if not self.mail_from:
            missing.append("MAIL_FROM")
        return missing

    @property
    def is_configured(self) -> bool:
        return not self.missing_required()


settings = Settings()
