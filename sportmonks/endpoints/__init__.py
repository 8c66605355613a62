"""
API endpoint wrappers for the Sportmonks API.
"""

from .fixtures import *
from .leagues import *
from .seasons import *
from .teams import *
from .venues import *
