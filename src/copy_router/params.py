# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from datetime import datetime, timezone
from typing import Dict, Mapping, Optional

BUILTIN_PARAMETERS = ('year', 'month', 'day', 'ds', 'region')
UNKNOWN_REGION = 'unknown'

def add_builtin_parameters(captures: Mapping[str, str], region: Optional[str] = None, now: Optional[datetime] = None) -> Dict[str, str]:
    """
    Returns a copy of the captured parameters with the built-in parameters added.

    Built-ins win over captures of the same name: a pattern capturing ':year' still
    renders the invocation year. Dates are taken in UTC at call time, so a retried
    invocation may route the same object to a different date.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    parameters = dict(captures)
    parameters['year'] = str(now.year)
    parameters['month'] = str(now.month)
    parameters['day'] = str(now.day)
    parameters['ds'] = now.strftime('%Y-%m-%d')
    parameters['region'] = region or UNKNOWN_REGION
    return parameters
