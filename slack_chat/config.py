from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"

    # Slack Web API
    SLACK_TOKEN: str = ""
    SLACK_API_URL: str = "https://slack.com/api/"
    SLACK_DEBUG: bool = False  # dump non-200 responses to the log
    SLACK_HTTP_TIMEOUT: float = 30.0


settings = Settings()
