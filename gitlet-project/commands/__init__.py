# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import add
from . import commit
from . import rm
from . import log
from . import global_log
from . import find
from . import status
from . import checkout
from . import reset
from . import branch
from . import rm_branch
from . import merge
from . import remote
from . import push
from . import fetch
from . import pull
from . import config
