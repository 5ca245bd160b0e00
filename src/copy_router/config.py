# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import re

from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .params import UNKNOWN_REGION
from .rendering import Template
from .routing import Router

ENV_INPUT_PATTERN = 'INPUT_PATTERN'
ENV_OUTPUT_TEMPLATE = 'OUTPUT_TEMPLATE'
ENV_EXCLUDE_REGEX = 'EXCLUDE_REGEX'
ENV_OUTPUT_BUCKET = 'OUTPUT_BUCKET'
ENV_REGION = 'AWS_REGION'

@dataclass(frozen = True)
class Config:
    router: Router
    template: Template
    exclude: Optional[re.Pattern] = None
    output_bucket: Optional[str] = None
    region: str = UNKNOWN_REGION

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> 'Config':
        """ Builds the configuration from the function's environment variables. Empty values count as unset. """
        input_pattern = environ.get(ENV_INPUT_PATTERN)
        if not input_pattern:
            raise ConfigurationError(f'You must define {ENV_INPUT_PATTERN} in the environment')

        output_template = environ.get(ENV_OUTPUT_TEMPLATE)
        if not output_template:
            raise ConfigurationError(f'You must define {ENV_OUTPUT_TEMPLATE} in the environment')

        exclude = None
        exclude_regex = environ.get(ENV_EXCLUDE_REGEX)
        if exclude_regex:
            try:
                exclude = re.compile(exclude_regex)
            except re.error as e:
                raise ConfigurationError(f'Failed to compile {ENV_EXCLUDE_REGEX} "{exclude_regex}": {e}') from e

        return cls(
            router = Router([input_pattern]),
            template = Template(output_template),
            exclude = exclude,
            output_bucket = environ.get(ENV_OUTPUT_BUCKET) or None,
            region = environ.get(ENV_REGION) or UNKNOWN_REGION
        )
