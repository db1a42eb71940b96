# flake8: noqa
"""
Payload types of the Keptn api.
"""

from .common import KeptnModel, Error
from .evaluation import Evaluation
from .event import Events, EventContext, KeptnContextExtendedCE
from .metadata import Metadata
from .project import CreateProject, DeleteProjectResponse, Project
from .service import CreateService, DeleteServiceResponse, Service
from .stage import Stage, Stages
