"""
通用测试 Fixture 定义

提供测试所需的端点类、值对象
"""

import pytest

from endpointflex import Endpoint, ValueObject


class GetDocument(Endpoint):
    """测试用端点：带两个路由参数的 GET 请求"""

    http_method = "GET"
    uri_template = "/engines/{engine_name}/documents/{document_id}"
    route_params = ["engine_name", "document_id"]
    param_whitelist = ["fields[]", "page"]


class SearchDocuments(Endpoint):
    """测试用端点：带列表参数的 POST 请求"""

    http_method = "POST"
    uri_template = "/engines/{engine_name}/search"
    route_params = ["engine_name"]
    param_whitelist = ["query", "tags[]", "some_param"]


class ListEngines(Endpoint):
    """测试用端点：无路由参数"""

    http_method = "get"
    uri_template = "engines"
    param_whitelist = ["knownKey"]


class Identifier(ValueObject):
    """测试用值对象"""

    def __init__(self, value):
        self.value = value

    def to_value(self):
        return self.value


@pytest.fixture
def get_document():
    return GetDocument()


@pytest.fixture
def search_documents():
    return SearchDocuments()


@pytest.fixture
def list_engines():
    return ListEngines()


@pytest.fixture
def wrap():
    """返回值对象构造函数"""
    return Identifier

