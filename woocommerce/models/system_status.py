from .model import Model
from .fields import Integer, String, Boolean, Raw, Nested, List
from ..utils import FakeHelper
from ..constants import ModelMethod


class SystemStatusEnvironment(Model):
    IDENTIFIER = 'home_url'

    home_url = String(fake=FakeHelper.url)
    site_url = String(fake=FakeHelper.url)
    version = String(fake=lambda: f'{FakeHelper.integer(3, 9)}.{FakeHelper.integer(0, 9)}.0')
    log_directory = String(fake=lambda: f'/var/www/wp-content/uploads/{FakeHelper.slug()}/')
    log_directory_writable = Boolean()
    wp_version = String(fake=lambda: f'6.{FakeHelper.integer(0, 9)}')
    wp_multisite = Boolean()
    wp_memory_limit = Integer()
    wp_debug_mode = Boolean()
    wp_cron = Boolean()
    language = String(fake=lambda: 'en_US')
    server_info = String()
    php_version = String(fake=lambda: f'8.{FakeHelper.integer(0, 3)}')
    php_post_max_size = Integer()
    php_max_execution_time = Integer()
    php_max_input_vars = Integer()
    curl_version = String()
    suhosin_installed = Boolean()
    max_upload_size = Integer()
    mysql_version = String()
    default_timezone = String(fake=lambda: 'UTC')
    fsockopen_or_curl_enabled = Boolean()
    soapclient_enabled = Boolean()
    domdocument_enabled = Boolean()
    gzip_enabled = Boolean()
    mbstring_enabled = Boolean()
    remote_post_successful = Boolean()
    remote_post_response = String(fake=lambda: '200')
    remote_get_successful = Boolean()
    remote_get_response = String(fake=lambda: '200')


class SystemStatusDatabase(Model):
    IDENTIFIER = 'database_prefix'

    wc_database_version = String()
    database_prefix = String(fake=lambda: 'wp_')
    maxmind_geoip_database = String()
    database_tables = Raw(fake=lambda: {'woocommerce': {}, 'other': {}})


class SystemStatusTheme(Model):
    IDENTIFIER = 'name'

    name = String()
    version = String(fake=lambda: f'{FakeHelper.integer(1, 5)}.0')
    version_latest = String(fake=lambda: f'{FakeHelper.integer(1, 5)}.1')
    author_url = String(fake=FakeHelper.url)
    is_child_theme = Boolean()
    has_woocommerce_support = Boolean()
    has_woocommerce_file = Boolean()
    has_outdated_templates = Boolean()
    overrides = List(Raw(), count=(0, 3))
    parent_name = String()
    parent_version = String()
    parent_author_url = String(fake=FakeHelper.url)


class SystemStatusSettings(Model):
    IDENTIFIER = None

    api_enabled = Boolean()
    force_ssl = Boolean()
    currency = String(fake=FakeHelper.currency_code)
    currency_symbol = String(fake=lambda: '$')
    currency_position = String(fake=lambda: FakeHelper.random_item(['left', 'right', 'left_space', 'right_space']))
    thousand_separator = String(fake=lambda: ',')
    decimal_separator = String(fake=lambda: '.')
    number_of_decimals = Integer(fake=lambda: FakeHelper.integer(0, 3))
    geolocation_enabled = Boolean()
    taxonomies = Raw(fake=lambda: {'simple': 'simple', 'variable': 'variable'})


class SystemStatusSecurity(Model):
    IDENTIFIER = None

    secure_connection = Boolean()
    hide_errors = Boolean()


class SystemStatus(Model):

    """Wraps the ``system_status`` report

    ``active_plugins`` and ``pages`` are kept as sent; their shape differs between WooCommerce versions
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#system-status'
    IDENTIFIER = None

    environment = Nested(SystemStatusEnvironment)
    database = Nested(SystemStatusDatabase)
    active_plugins = List(Raw(), count=(0, 5))
    theme = Nested(SystemStatusTheme)
    settings = Nested(SystemStatusSettings)
    security = Nested(SystemStatusSecurity)
    pages = List(Raw(), count=(0, 5))


class SystemStatusTool(Model):

    """A tool from ``system_status/tools``; running it returns ``success`` and ``message``"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#system-status-tools'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.UPDATE]

    id = String(fake=lambda: FakeHelper.random_item(['clear_transients', 'clear_expired_transients',
                                                     'recount_terms', 'reset_roles', 'clear_sessions']))
    name = String(fake=FakeHelper.sentence)
    action = String()
    description = String(fake=FakeHelper.sentence)
    success = Boolean()
    message = String(fake=FakeHelper.sentence)
    confirm = Boolean()
