"""端点基类模块

生成的 API 客户端端点类继承自 Endpoint，每个子类描述一个 REST 操作：

    class GetDocument(Endpoint):
        http_method = "GET"
        uri_template = "/engines/{engine_name}/documents/{document_id}"
        route_params = ["engine_name", "document_id"]
        param_whitelist = ["fields[]", "page"]

端点负责在发送请求前组装请求数据：
- 替换 URI 模板中的路由参数占位符
- 按白名单校验参数名（只校验名称，不校验取值）
- 规范化请求体和表单数据（移除空值、移除键前缀、转换 snake_case）
- 还原值对象为原始值

端点本身不执行任何 HTTP 请求，由调用方的 HTTP 客户端读取
method()/uri()/params()/body()/form_data() 后发送。

端点实例不是线程安全的，每个请求应创建独立的实例。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from endpointflex.constants import (
    DEFAULT_KEY_PREFIX,
    HTTP_METHODS,
    INVALID_PARAM_MESSAGE,
    INVALID_PARAMS_MESSAGE,
    PARAM_LIST_SEPARATOR,
    PATH_SEPARATOR,
)
from endpointflex.exceptions import (
    APIClientValidationError,
    InvalidParameterError,
    MissingRouteParameterError,
)
from endpointflex.utils import (
    no_null_items,
    normalize_whitelist,
    remove_prefix_from_keys,
    to_snake_cased_keys,
)
from endpointflex.value_object import unwrap_value

logger = logging.getLogger(__name__)


class BaseEndpoint(ABC):
    """
    端点接口

    HTTP 客户端只依赖此接口读取请求数据，调用方通过 set_* 方法配置端点。
    """

    @abstractmethod
    def method(self) -> str:
        """返回 HTTP 方法"""

    @abstractmethod
    def uri(self) -> str:
        """返回替换路由参数后的相对路径"""

    @abstractmethod
    def params(self) -> dict[str, Any]:
        """返回查询参数"""

    @abstractmethod
    def set_params(self, params: Mapping[str, Any] | None) -> BaseEndpoint:
        """设置参数"""

    @abstractmethod
    def body(self) -> dict[str, Any] | None:
        """返回请求体"""

    @abstractmethod
    def set_body(self, body: Mapping[str, Any] | None) -> BaseEndpoint:
        """设置请求体"""

    @abstractmethod
    def form_data(self) -> dict[str, Any] | None:
        """返回表单数据"""

    @abstractmethod
    def set_form_data(self, form_data: Mapping[str, Any] | None) -> BaseEndpoint:
        """设置表单数据"""


class Endpoint(BaseEndpoint):
    """
    端点基类

    类属性:
        http_method: HTTP 方法（必须在子类中设置）
        uri_template: 包含 {name} 占位符的 URI 模板（必须在子类中设置）
        route_params: 需要替换到 uri_template 中的路由参数名，按声明顺序
        param_whitelist: 允许的查询参数名，以 "[]" 结尾表示列表参数
        snake_cased_params: set_params 时是否将参数名转换为 snake_case
        snake_cased_body: set_body 时是否将请求体的键转换为 snake_case
        snake_cased_form_data: set_form_data 时是否将表单数据的键转换为 snake_case
        key_prefix: 请求体/表单数据中需要移除的键前缀
        strict_route_params: uri() 遇到未设置的路由参数时是否抛出异常
    """

    # ========== 端点形态（由生成的子类设置） ==========
    http_method: str = ""
    uri_template: str = ""
    route_params: list[str] = []
    param_whitelist: list[str] = []

    # ========== 规范化配置 ==========
    snake_cased_params: bool = False
    snake_cased_body: bool = False
    snake_cased_form_data: bool = False
    key_prefix: str = DEFAULT_KEY_PREFIX

    # False 时未设置的路由参数替换为空字符串并记录警告，True 时抛出 MissingRouteParameterError
    strict_route_params: bool = False

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        form_data: Mapping[str, Any] | None = None,
        http_method: str | None = None,
        uri_template: str | None = None,
        route_params: list[str] | None = None,
        param_whitelist: list[str] | None = None,
        snake_cased_params: bool | None = None,
        snake_cased_body: bool | None = None,
        snake_cased_form_data: bool | None = None,
        key_prefix: str | None = None,
        strict_route_params: bool | None = None,
    ):
        """
        初始化端点实例

        参数:
            params: 初始参数，经过 set_params 校验
            body: 初始请求体，经过规范化
            form_data: 初始表单数据，经过规范化
            其余参数: 覆盖同名类属性，None 时使用类属性

        异常:
            APIClientValidationError: 未设置 http_method 或 uri_template 时抛出
            InvalidParameterError: params 包含非法参数名时抛出
        """
        http_method = http_method if http_method is not None else self.http_method
        if not http_method:
            raise APIClientValidationError(f"{self.__class__.__name__}: http_method must be provided.")

        uri_template = uri_template if uri_template is not None else self.uri_template
        if not uri_template:
            raise APIClientValidationError(f"{self.__class__.__name__}: uri_template must be provided.")

        self._http_method = http_method.upper()
        if self._http_method not in HTTP_METHODS:
            raise APIClientValidationError(f"{self.__class__.__name__}: unsupported http_method {http_method!r}.")
        self._uri_template = uri_template
        self.route_params = list(route_params if route_params is not None else self.route_params)
        self.param_whitelist = list(param_whitelist if param_whitelist is not None else self.param_whitelist)

        if snake_cased_params is not None:
            self.snake_cased_params = snake_cased_params
        if snake_cased_body is not None:
            self.snake_cased_body = snake_cased_body
        if snake_cased_form_data is not None:
            self.snake_cased_form_data = snake_cased_form_data
        if key_prefix is not None:
            self.key_prefix = key_prefix
        if strict_route_params is not None:
            self.strict_route_params = strict_route_params

        self._params: dict[str, Any] = {}
        self._body: dict[str, Any] | None = None
        self._form_data: dict[str, Any] | None = None

        self.set_params(params)
        if body is not None:
            self.set_body(body)
        if form_data is not None:
            self.set_form_data(form_data)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._http_method} {self._uri_template}>"

    # ========== 读取 ==========

    def method(self) -> str:
        return self._http_method

    def uri(self) -> str:
        """
        替换 URI 模板中的路由参数占位符

        每个路由参数独立查找 "{name}" 并以 str(value) 替换，最后移除开头的路径分隔符。
        未设置或值为 None 的路由参数替换为空字符串并记录警告，
        strict_route_params 为 True 时改为抛出异常。

        示例:
            uri_template = "/engines/{engine_name}/documents"
            params = {"engine_name": "books"}
            # 返回: "engines/books/documents"

        异常:
            MissingRouteParameterError: strict_route_params 为 True 且路由参数未设置时抛出
        """
        missing = [name for name in self.route_params if self._params.get(name) is None]
        if missing:
            if self.strict_route_params:
                raise MissingRouteParameterError(
                    f"Missing route parameters for {self._uri_template}: {', '.join(missing)}",
                    missing_params=missing,
                )
            logger.warning(f"{self!r}: route parameters {missing} are not set, substituting empty values")

        uri = self._uri_template
        for name in self.route_params:
            value = self._params.get(name)
            uri = uri.replace(f"{{{name}}}", "" if value is None else str(value))

        return uri.lstrip(PATH_SEPARATOR)

    def params(self) -> dict[str, Any]:
        """返回白名单内、值不为 None 的参数，路由参数不包含在内（除非也在白名单中）"""
        whitelist = set(normalize_whitelist(self.param_whitelist))
        return no_null_items({name: value for name, value in self._params.items() if name in whitelist})

    def body(self) -> dict[str, Any] | None:
        return self._body

    def form_data(self) -> dict[str, Any] | None:
        return self._form_data

    def allowed_params(self) -> list[str]:
        """
        返回允许的参数名列表：规范化白名单 + 路由参数，按声明顺序去重
        """
        return list(dict.fromkeys([*normalize_whitelist(self.param_whitelist), *self.route_params]))

    def to_request_data(self) -> dict[str, Any]:
        """
        汇总 HTTP 客户端需要的请求数据，json/data 对应请求体和表单数据

        返回:
            {"method": ..., "uri": ..., "params": ..., "json": ..., "data": ...}
        """
        return {
            "method": self.method(),
            "uri": self.uri(),
            "params": self.params(),
            "json": self.body(),
            "data": self.form_data(),
        }

    # ========== 设置 ==========

    def set_params(self, params: Mapping[str, Any] | None) -> Endpoint:
        """
        设置参数（整体替换，不与已有参数合并）

        参数:
            params: 参数字典，None 时不做任何修改

        执行步骤:
            1. 如果开启 snake_cased_params，将参数名转换为 snake_case
            2. 校验参数名是否在白名单或路由参数中
            3. 还原值对象为原始值
            4. 整体替换当前参数

        异常:
            InvalidParameterError: 存在非法参数名时抛出，当前参数保持不变
        """
        if params is None:
            return self

        params = dict(params)
        if self.snake_cased_params:
            params = to_snake_cased_keys(params)

        self._check_params(params)

        self._params = {name: unwrap_value(value) for name, value in params.items()}
        logger.debug(f"{self!r}: params set to {list(self._params)}")
        return self

    def set_body(self, body: Mapping[str, Any] | None) -> Endpoint:
        self._body = self._transform_data(body, self.snake_cased_body)
        return self

    def set_form_data(self, form_data: Mapping[str, Any] | None) -> Endpoint:
        self._form_data = self._transform_data(form_data, self.snake_cased_form_data)
        return self

    def set_snake_cased_params(self, snake_cased_params: bool) -> Endpoint:
        self.snake_cased_params = snake_cased_params
        return self

    def set_snake_cased_body(self, snake_cased_body: bool) -> Endpoint:
        self.snake_cased_body = snake_cased_body
        return self

    def set_snake_cased_form_data(self, snake_cased_form_data: bool) -> Endpoint:
        self.snake_cased_form_data = snake_cased_form_data
        return self

    # ========== 内部方法 ==========

    def _transform_data(self, data: Mapping[str, Any] | None, snake_cased: bool) -> dict[str, Any] | None:
        """
        请求体/表单数据规范化：移除 None 值 -> 移除键前缀 -> 可选的 snake_case 转换

        只处理顶层键，嵌套结构保持原样。
        """
        if data is None:
            return None

        data = remove_prefix_from_keys(no_null_items(data), self.key_prefix)
        if snake_cased:
            data = to_snake_cased_keys(data)
        return data

    def _check_params(self, params: Mapping[str, Any]) -> None:
        """
        校验参数名都在允许列表中

        异常:
            InvalidParameterError: 存在非法参数名时抛出
        """
        allowed = self.allowed_params()
        allowed_set = set(allowed)
        invalid = [name for name in params if name not in allowed_set]
        if not invalid:
            return

        template = INVALID_PARAMS_MESSAGE if len(invalid) > 1 else INVALID_PARAM_MESSAGE
        message = template.format(
            invalid=PARAM_LIST_SEPARATOR.join(str(name) for name in invalid),
            allowed=PARAM_LIST_SEPARATOR.join(allowed),
        )
        logger.debug(f"{self!r}: rejected params {invalid}")
        raise InvalidParameterError(message, invalid_params=invalid, allowed_params=allowed)
