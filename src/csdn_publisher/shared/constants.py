"""全局常量"""

# 版本信息
VERSION = "1.0.0"
APP_NAME = "CSDN Publisher"

# CSDN 发布接口
CSDN_BASE_URL = "https://bizapi.csdn.net/"
CSDN_PUBLISH_PATH = "blog-console-api/v3/mdeditor/saveArticle"
CSDN_EDITOR_ORIGIN = "https://editor.csdn.net"

# 超时（秒），连接/读/写统一使用
DEFAULT_TIMEOUT = 300

# 浏览器指纹（与 CSDN Web 编辑器保持一致）
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
)
SEC_CH_UA = '"Not(A:Brand";v="99", "Google Chrome";v="133", "Chromium";v="133"'

# 网关签名头（从 Web 编辑器抓取的固定值，CSDN 轮换后需手动更新）
DEFAULT_CA_KEY = "203803574"
DEFAULT_CA_NONCE = "138d7d05-2600-482d-83a6-62e6c02bdc17"
DEFAULT_CA_SIGNATURE = "I1z2XgTgYqo839qPZYINgKRHWp3v7XlHO8QbmLDKMDA="
DEFAULT_CA_SIGNATURE_HEADERS = "x-ca-key,x-ca-nonce"

# MCP 工具
MCP_SERVER_NAME = "CSDN Publisher"
PUBLISH_TOOL_NAME = "saveCsdnArticle"
PUBLISH_TOOL_DESCRIPTION = "发布Csdn文章"

# 日志
LOG_FILE_NAME = "csdn_publisher.log"
