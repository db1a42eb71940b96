from typing import Optional

from .api_resource import APIResource

from .types.evaluation import Evaluation
from .types.event import EventContext


class EvaluationAPI(APIResource):
    def trigger(
        self, project: str, stage: str, service: str, evaluation: Evaluation
    ) -> Optional[EventContext]:
        """
        Triggers the evaluation of the quality gates of a service in a stage.
        The evaluation runs asynchronously; use the keptn context of the returned
        event context to look up its result.
        """
        return self.execute(
            "POST",
            self.path(
                "/v1/project/{}/stage/{}/service/{}/evaluation", project, stage, service
            ),
            request=evaluation,
            response_type=EventContext,
        )
