import sys
from enum import Enum

if sys.version_info >= (3, 11):
    from enum import StrEnum

    class EnvironmentEnum(StrEnum):
        LOCAL = 'LOCAL'
        DEV = 'DEV'
        STAGE = 'STAGING'
        PROD = 'PROD'

else:

    class EnvironmentEnum(str, Enum):
        LOCAL = 'LOCAL'
        DEV = 'DEV'
        STAGE = 'STAGING'
        PROD = 'PROD'
