# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Normalize Lambda payloads into the S3 objects they announce.

A function can be subscribed to bucket notifications directly, in which case the
payload is an S3 event:

    {"Records": [{"s3": {"bucket": {"name": ...}, "object": {"key": ...}}}]}

or through an SQS queue, in which case every SQS record carries an S3 event (or the
``s3:TestEvent`` S3 sends when the notification is first configured) as a JSON string
in its ``body``. Each shape is attempted in turn; a shape that does not fit yields
``None`` and the next one is tried.
"""

import json

from dataclasses import dataclass
from typing import Any, List, Optional

from aws_lambda_powertools import Logger

from .exceptions import MalformedEvent

logger = Logger(child = True)

TEST_EVENT_FIELD = 'Event'
TEST_EVENT_VALUE = 's3:TestEvent'

@dataclass(frozen = True)
class ObjectEntity:
    bucket_name: str
    object_key: Optional[str] = None

_UNDECODABLE = object()

def _decode_json(body: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return _UNDECODABLE

def _entity_from_record(record: Any) -> Optional[ObjectEntity]:
    if not isinstance(record, dict):
        return None
    s3 = record.get('s3')
    if not isinstance(s3, dict):
        return None
    bucket = s3.get('bucket')
    obj = s3.get('object')
    if not isinstance(bucket, dict) or not isinstance(obj, dict):
        return None

    bucket_name = bucket.get('name')
    key = obj.get('key')
    if not isinstance(bucket_name, str) or not (key is None or isinstance(key, str)):
        return None
    return ObjectEntity(bucket_name, key)

def s3_entities(payload: Any) -> Optional[List[ObjectEntity]]:
    """ Entities of a direct S3 notification, or None when the payload is not one. """
    if not isinstance(payload, dict) or not isinstance(payload.get('Records'), list):
        return None

    entities = []
    for record in payload['Records']:
        entity = _entity_from_record(record)
        if entity is None:
            return None
        entities.append(entity)
    return entities

def sqs_bodies(payload: Any) -> Optional[List[str]]:
    """ Message bodies of an SQS batch, or None when the payload is not one. """
    if not isinstance(payload, dict) or not isinstance(payload.get('Records'), list):
        return None

    bodies = []
    for record in payload['Records']:
        if not isinstance(record, dict) or not isinstance(record.get('body'), str):
            return None
        bodies.append(record['body'])
    return bodies

def is_test_event(document: Any) -> bool:
    return isinstance(document, dict) and document.get(TEST_EVENT_FIELD) == TEST_EVENT_VALUE

def entities_from_message(body: str) -> List[ObjectEntity]:
    """
    Entities carried by a single SQS message body.

    The S3 test event contributes nothing. Any other body that is not an S3
    notification raises MalformedEvent, which fails the whole invocation.
    """
    document = _decode_json(body)
    if document is _UNDECODABLE:
        raise MalformedEvent('SQS message body is not valid JSON')

    entities = s3_entities(document)
    if entities is not None:
        return entities

    if is_test_event(document):
        logger.info('Ignoring %s message delivered through SQS', TEST_EVENT_VALUE)
        return []

    raise MalformedEvent('SQS message body is not an S3 event notification')

def entities_from_payload(payload: Any) -> List[ObjectEntity]:
    """ Return the S3 objects announced by the invocation payload, in delivery order. """
    bodies = sqs_bodies(payload)
    if bodies is not None:
        logger.debug('Unwrapping %d SQS messages', len(bodies))
        entities = []
        for body in bodies:
            entities.extend(entities_from_message(body))
        return entities

    entities = s3_entities(payload)
    if entities is not None:
        return entities

    raise MalformedEvent('Invalid/unsupported event; expected S3 or SQS "Records"')
