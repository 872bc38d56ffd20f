from .exceptions import CpiError, ConfigurationError, GroupError, CollectiveError
from .group import GroupContext, MPIGroup, ThreadTeam, ThreadGroup
from .partition import Partition, partition, partition_all
from .integrate import step_width, local_sum, sequential_sum
from .collective import GlobalResult, compute_pi

__version__ = '0.1.0'
