from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # LLM 프로바이더 선택: "openai", "vllm", "gemini"
    llm_provider: str = "openai"

    # OpenAI 설정
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 60.0

    # vLLM 설정 - OpenAI 호환 엔드포인트
    vllm_api_url: str = ""
    vllm_api_key: str = ""
    vllm_model: str = ""
    vllm_timeout: float = 120.0

    # Gemini 설정
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout: float = 60.0

    # 생성 파라미터
    llm_temperature: float = 0.2
    llm_max_output_tokens: int = 1024

    # diff 전처리 설정
    diff_rules_path: str = ""
    max_input_length: int = 200_000

    # 요청 제한
    rate_limit_default: str = "60/minute"

    # 로깅 설정
    log_level: str = "INFO"

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate_for_production(self) -> list[str]:
        """프로덕션 환경에서 필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        provider = self.llm_provider.lower()
        if provider == "openai" and not self.openai_api_key:
            errors.append("OPENAI_API_KEY")
        if provider == "vllm" and not self.vllm_api_url:
            errors.append("VLLM_API_URL")
        if provider == "gemini" and not self.gemini_api_key:
            errors.append("GEMINI_API_KEY")
        return errors

    @model_validator(mode="after")
    def validate_production_settings(self):
        """프로덕션 환경에서 필수 설정 검증"""
        if self.is_production:
            missing = self.validate_for_production()
            if missing:
                raise ValueError(f"프로덕션 환경에서 필수 설정 누락: {', '.join(missing)}")
        return self


settings = Settings()
