"""도구 레지스트리"""

from typing import Any

from langchain_core.tools import BaseTool
from loguru import logger
from pydantic import ValidationError

from .core.errors import FsError
from .core.models import ToolResult


class ToolCategory:
    """도구 카테고리"""

    FILESYSTEM = "filesystem"
    SEARCH = "search"


class ToolRegistry:
    """도구 중앙 관리 레지스트리 (싱글톤)"""

    _instance = None

    def __new__(cls):
        """싱글톤 구현"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """초기화 (싱글톤이므로 한 번만 실행)"""
        if self._initialized:
            return
        self._tools: dict[str, BaseTool] = {}
        self._categories: dict[str, set[str]] = {}
        self._initialized = True

    def register(
        self, tool: BaseTool, category: str = ToolCategory.FILESYSTEM, replace: bool = False
    ):
        """도구 등록

        Args:
            tool: LangChain BaseTool 인스턴스
            category: 도구 카테고리
            replace: 기존 도구 덮어쓰기 허용 여부

        Raises:
            ValueError: 이미 존재하는 도구이고 replace=False인 경우
        """
        name = tool.name

        if name in self._tools and not replace:
            raise ValueError(f"도구 '{name}'이 이미 등록되어 있습니다")

        self._tools[name] = tool
        self._categories.setdefault(category, set()).add(name)

        logger.debug("도구 등록: {} (카테고리: {})", name, category)

    def register_multiple(
        self, tools: list[BaseTool], category: str = ToolCategory.FILESYSTEM, replace: bool = False
    ):
        """여러 도구 일괄 등록"""
        for tool in tools:
            self.register(tool, category=category, replace=replace)

    def get_tool(self, name: str) -> BaseTool | None:
        """도구 조회"""
        return self._tools.get(name)

    def get_all_tools(self) -> list[BaseTool]:
        """모든 도구 반환"""
        return list(self._tools.values())

    def get_tools_by_category(self, category: str) -> list[BaseTool]:
        """카테고리별 도구 조회"""
        tool_names = self._categories.get(category, set())
        return [self._tools[name] for name in sorted(tool_names) if name in self._tools]

    def list_categories(self) -> list[str]:
        """등록된 카테고리 목록"""
        return list(self._categories.keys())

    def get_tool_names(self) -> list[str]:
        """등록된 도구 이름 목록"""
        return list(self._tools.keys())

    def unregister(self, tool_name: str):
        """도구 등록 해제"""
        if tool_name not in self._tools:
            logger.warning("등록되지 않은 도구: {}", tool_name)
            return

        for category_tools in self._categories.values():
            category_tools.discard(tool_name)

        del self._tools[tool_name]
        logger.info("도구 등록 해제: {}", tool_name)

    def execute(self, name: str, args: dict[str, Any] | None = None) -> ToolResult:
        """이름으로 도구 실행

        실패해도 예외를 던지지 않고 is_error=True인 ToolResult를 반환합니다.

        Args:
            name: 도구 이름
            args: 도구 입력값

        Returns:
            ToolResult: 실행 결과
        """
        tool = self.get_tool(name)
        if tool is None:
            return ToolResult(result=f"알 수 없는 도구: {name}", is_error=True)

        try:
            output = tool.invoke(args or {})
        except FsError as e:
            return ToolResult(result=e.message, is_error=True, error_kind=e.kind.value)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            return ToolResult(
                result=f"입력값이 없거나 잘못되었습니다: {', '.join(fields)}",
                is_error=True,
            )
        except Exception as e:
            logger.exception("도구 실행 오류: {}", name)
            return ToolResult(result=f"도구 실행 오류: {e}", is_error=True)

        return ToolResult(result=str(output))

    def clear(self):
        """모든 도구 제거 (테스트용)"""
        self._tools.clear()
        self._categories.clear()
        logger.debug("ToolRegistry cleared")


def get_registry() -> ToolRegistry:
    """전역 레지스트리 반환"""
    return ToolRegistry()
