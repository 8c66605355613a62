"""
Pydantic models for Sportmonks API responses.
"""

from .common import *
from .fixture import *
from .league import *
from .season import *
from .team import *
from .venue import *
