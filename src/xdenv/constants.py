"""Property keys, artifact layout and built-in defaults."""

XD_ADMIN_HOST = "xd_admin_host"
XD_CONTAINERS = "xd_containers"
XD_HTTP_PORT = "xd_http_port"
XD_JMX_PORT = "xd_jmx_port"
XD_CONTAINER_LOG_DIR = "xd_container_log_dir"
XD_BASE_DIR = "xd_base_dir"

XD_PRIVATE_KEY_FILE = "xd_private_key_file"
XD_RUN_ON_EC2 = "xd_run_on_ec2"
XD_PAUSE_TIME = "xd_pause_time"

JDBC_URL = "jdbc_url"
JDBC_USERNAME = "jdbc_username"
JDBC_PASSWORD = "jdbc_password"
JDBC_DATABASE = "jdbc_database"
JDBC_DRIVER = "jdbc_driver"

# Keys that the artifact can provide; the environment is searched for the same set.
DEPLOYMENT_KEYS = (XD_ADMIN_HOST, XD_CONTAINERS, XD_JMX_PORT, XD_HTTP_PORT)

PROPERTY_KEYS = DEPLOYMENT_KEYS + (
    XD_CONTAINER_LOG_DIR,
    XD_BASE_DIR,
    XD_PRIVATE_KEY_FILE,
    XD_RUN_ON_EC2,
    XD_PAUSE_TIME,
    JDBC_URL,
    JDBC_USERNAME,
    JDBC_PASSWORD,
    JDBC_DATABASE,
    JDBC_DRIVER,
)

DEFAULT_CONTAINER_LOG_LOCATION = "/home/ubuntu/spring-xd-1.0.0.BUILD-SNAPSHOT/xd/logs/container.log"
DEFAULT_BASE_DIR = "/home/ubuntu/spring-xd-1.0.0.BUILD-SNAPSHOT/xd"
DEFAULT_RUN_ON_EC2 = True
DEFAULT_PAUSE_TIME = 1

HTTP_PREFIX = "http://"
URL_SCHEMES = {"http", "https"}

ARTIFACT_NAME = "ec2servers.csv"
DEFAULT_CONFIG_NAME = ".xdenv.yml"

ADMIN_TOKEN = "adminNode"
CONTAINER_TOKEN = "containerNode"
SINGLENODE_TOKEN = "singleNode"

SERVER_TYPE_OFFSET = 0
HOST_OFFSET = 1
XD_PORT_OFFSET = 2
HTTP_PORT_OFFSET = 3
JMX_PORT_OFFSET = 4
MIN_ARTIFACT_TOKENS = 4
