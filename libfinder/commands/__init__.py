from .config import config
from .doctor import doctor
from .find import find
from .list_packages import list_packages
from .log import log
from .version import version
