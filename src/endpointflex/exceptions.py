"""
端点运行时异常模块

定义端点配置和参数校验相关的异常类，提供统一的错误处理机制
"""

from __future__ import annotations


class APIClientError(Exception):
    """
    异常基类

    所有自定义异常的基类，调用方可以统一捕获端点组装过程中的错误
    """


class APIClientValidationError(APIClientError):
    """
    配置验证异常

    当端点的类属性或构造参数（http_method、uri_template 等）无效时抛出此异常
    """


class APIClientRequestValidationError(APIClientError):
    """
    请求输入验证异常

    参数:
        message: 错误描述信息
        errors: 验证错误详情字典（可选）

    属性:
        errors: 验证失败的详细错误信息，格式为 {field_name: [error_messages]}
    """

    def __init__(self, message: str, errors: dict | None = None):
        super().__init__(message)
        self.errors = errors or {}


class InvalidParameterError(APIClientRequestValidationError):
    """
    参数名校验异常

    当 set_params 收到白名单和路由参数之外的参数名时抛出，此时端点状态不会被修改

    属性:
        invalid_params: 非法参数名列表（按输入顺序）
        allowed_params: 允许的参数名列表（按声明顺序）
    """

    def __init__(self, message: str, invalid_params: list[str], allowed_params: list[str]):
        super().__init__(message, errors={name: ["not a valid parameter"] for name in invalid_params})
        self.invalid_params = list(invalid_params)
        self.allowed_params = list(allowed_params)


class MissingRouteParameterError(APIClientRequestValidationError):
    """
    路由参数缺失异常

    仅在端点开启 strict_route_params 时，由 uri() 在路由参数未设置时抛出

    属性:
        missing_params: 未设置的路由参数名列表
    """

    def __init__(self, message: str, missing_params: list[str]):
        super().__init__(message, errors={name: ["route parameter is required"] for name in missing_params})
        self.missing_params = list(missing_params)
