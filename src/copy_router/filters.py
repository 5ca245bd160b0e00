# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import re

from typing import Iterable, List, Optional

from aws_lambda_powertools import Logger

from .events import ObjectEntity

logger = Logger(child = True)

def should_exclude(pattern: Optional[re.Pattern], key: str) -> bool:
    """ Returns True if the key matches the exclusion pattern anywhere. """
    if pattern is None:
        return False
    return pattern.search(key) is not None

def filter_entities(entities: Iterable[ObjectEntity], exclude: Optional[re.Pattern] = None) -> List[ObjectEntity]:
    kept = []
    for entity in entities:
        if not entity.object_key:
            logger.debug('Object in bucket %s has no key; ignoring', entity.bucket_name)
            continue
        if should_exclude(exclude, entity.object_key):
            logger.debug('Object key %s matches the exclusion pattern; ignoring', entity.object_key)
            continue
        kept.append(entity)
    return kept
