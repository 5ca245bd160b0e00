# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Iterator, List, Optional
from urllib.parse import unquote_plus

from aws_lambda_powertools import Logger, Tracer

from .config import Config
from .events import ObjectEntity, entities_from_payload
from .filters import filter_entities
from .params import add_builtin_parameters
from .routing import captured_parameters

tracer = Tracer()
logger = Logger(child = True)

@dataclass(frozen = True)
class CopyRequest:
    source_bucket: str
    source_key: str
    destination_bucket: str
    destination_key: str

    @property
    def copy_source(self) -> str:
        # Notification keys are URL encoded; boto3 encodes CopySource itself
        return f'{self.source_bucket}/{unquote_plus(self.source_key)}'

def copy_requests(entities: Iterable[ObjectEntity], config: Config, now: Optional[datetime] = None) -> Iterator[CopyRequest]:
    """
    Lazily routes and renders each entity. Keys that do not match the input pattern
    are skipped; a RenderError stops the iteration.
    """
    for entity in entities:
        logger.debug('Processing %s', entity)
        source_key = entity.object_key

        captures = captured_parameters(config.router, source_key)
        if captures is None:
            logger.info('Triggered with %s which does not match the input pattern, ignoring', source_key)
            continue

        parameters = add_builtin_parameters(captures, region = config.region, now = now)
        yield CopyRequest(
            source_bucket = entity.bucket_name,
            source_key = source_key,
            destination_bucket = config.output_bucket or entity.bucket_name,
            destination_key = config.template.render(parameters)
        )

@tracer.capture_method
def process_event(payload: Any, config: Config, copy: Callable[[CopyRequest], Any], now: Optional[datetime] = None) -> List[CopyRequest]:
    """
    Copies every object announced by the payload, one at a time and in delivery order.

    A malformed payload fails before anything is copied. A failure part way through
    (rendering or the copy itself) leaves the earlier copies in place.
    """
    entities = filter_entities(entities_from_payload(payload), config.exclude)

    copied = []
    for request in copy_requests(entities, config, now = now):
        logger.info('Copying %s to %s/%s', request.copy_source, request.destination_bucket, request.destination_key)
        copy(request)
        copied.append(request)
    return copied
