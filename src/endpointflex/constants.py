"""
Endpoint 运行时常量配置模块

定义端点基类使用的常量、默认配置等
"""

# HTTP 方法常量
HTTP_METHOD_GET = "GET"
HTTP_METHOD_POST = "POST"
HTTP_METHOD_PUT = "PUT"
HTTP_METHOD_DELETE = "DELETE"
HTTP_METHOD_PATCH = "PATCH"
HTTP_METHOD_HEAD = "HEAD"
HTTP_METHOD_OPTIONS = "OPTIONS"
HTTP_METHOD_TRACE = "TRACE"

HTTP_METHODS = {
    HTTP_METHOD_GET,
    HTTP_METHOD_POST,
    HTTP_METHOD_PUT,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_PATCH,
    HTTP_METHOD_HEAD,
    HTTP_METHOD_OPTIONS,
    HTTP_METHOD_TRACE,
}

# ========== 端点配置 ==========
# 白名单中表示列表参数的后缀，如 "tags[]"
LIST_MARKER = "[]"

# 请求体/表单数据中需要移除的键前缀，如 "prefixNumberCount" -> "count"
DEFAULT_KEY_PREFIX = "prefixNumber"

# URI 路径分隔符
PATH_SEPARATOR = "/"

# 校验失败时的错误信息模板
INVALID_PARAM_MESSAGE = '"{invalid}" is not a valid parameter. Allowed parameters are "{allowed}".'
INVALID_PARAMS_MESSAGE = '"{invalid}" are not valid parameters. Allowed parameters are "{allowed}".'
PARAM_LIST_SEPARATOR = '", "'

# 日志格式
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
