# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from typing import Mapping

from liquid import Environment
from liquid.exceptions import Error as LiquidError

from .exceptions import RenderError, TemplateCompileError

# Standard Liquid tags and filters; undefined variables render as ''
env = Environment()

class Template:
    """ A Liquid template for destination keys, e.g. "{{database}}/{{table | remove:'public.'}}/{{filename}}". """
    def __init__(self, source: str):
        self.source = source
        try:
            self._template = env.from_string(source)
        except LiquidError as e:
            raise TemplateCompileError(f'Invalid output template "{source}": {e}') from e

    def render(self, parameters: Mapping[str, str]) -> str:
        try:
            return self._template.render(parameters)
        except LiquidError as e:
            raise RenderError(f'Failed to render "{self.source}": {e}') from e

    def __repr__(self):
        return f'Template({self.source!r})'
