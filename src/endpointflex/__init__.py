"""
endpointflex 端点运行时模块

生成的 API 客户端端点类的运行时基类：URI 模板解析、参数白名单校验、请求数据规范化

主要组件:
    - Endpoint: 端点基类
    - ValueObject: 值对象基类
    - 异常类: APIClientError 及其子类
    - 工具函数: 空值移除、键前缀移除、snake_case 转换

使用示例:
    >>> from endpointflex import Endpoint
    >>>
    >>> class CreateDocuments(Endpoint):
    ...     http_method = "POST"
    ...     uri_template = "/engines/{engine_name}/documents"
    ...     route_params = ["engine_name"]
    >>>
    >>> endpoint = CreateDocuments().set_params({"engine_name": "books"}).set_body({"title": "Dune"})
    >>> endpoint.uri()
    'engines/books/documents'
    >>> endpoint.to_request_data()["json"]
    {'title': 'Dune'}
"""

# 端点
from endpointflex.endpoint import BaseEndpoint, Endpoint

# 值对象
from endpointflex.value_object import ValueObject, unwrap_value

# 异常类
from endpointflex.exceptions import (
    APIClientError,
    APIClientRequestValidationError,
    APIClientValidationError,
    InvalidParameterError,
    MissingRouteParameterError,
)

# 工具函数
from endpointflex.utils import (
    no_null_items,
    normalize_whitelist,
    remove_prefix_from_keys,
    to_snake_case,
    to_snake_cased_keys,
)

# 常量配置
from endpointflex.constants import (
    DEFAULT_KEY_PREFIX,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_GET,
    HTTP_METHOD_HEAD,
    HTTP_METHOD_OPTIONS,
    HTTP_METHOD_PATCH,
    HTTP_METHOD_POST,
    HTTP_METHOD_PUT,
    HTTP_METHOD_TRACE,
    LIST_MARKER,
)

__all__ = [
    # 端点
    "BaseEndpoint",
    "Endpoint",
    "ValueObject",
    "unwrap_value",
    # 异常
    "APIClientError",
    "APIClientValidationError",
    "APIClientRequestValidationError",
    "InvalidParameterError",
    "MissingRouteParameterError",
    # 工具函数
    "no_null_items",
    "remove_prefix_from_keys",
    "to_snake_case",
    "to_snake_cased_keys",
    "normalize_whitelist",
    # 常量
    "DEFAULT_KEY_PREFIX",
    "LIST_MARKER",
    "HTTP_METHOD_GET",
    "HTTP_METHOD_POST",
    "HTTP_METHOD_PUT",
    "HTTP_METHOD_DELETE",
    "HTTP_METHOD_PATCH",
    "HTTP_METHOD_HEAD",
    "HTTP_METHOD_OPTIONS",
    "HTTP_METHOD_TRACE",
]

__version__ = "0.1.0"
