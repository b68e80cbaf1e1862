from abc import ABC, abstractmethod
from typing import TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseLLMClient(ABC):
    """LLM 클라이언트 추상 클래스"""

    vendor: str = ""

    @abstractmethod
    def get_chat_model(self) -> BaseChatModel:
        """LangChain 호환 채팅 모델 반환"""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        pass

    def with_structured_output(self, schema: type[T], include_raw: bool = False) -> Runnable:
        """구조화된 출력을 위한 모델 반환

        include_raw=True이면 {"raw", "parsed", "parsing_error"} 딕셔너리를 반환하여
        토큰 사용량을 함께 확인할 수 있다.
        """
        return self.get_chat_model().with_structured_output(schema, include_raw=include_raw)
