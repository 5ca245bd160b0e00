# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import pytest

from copy_router.exceptions import RenderError, TemplateCompileError
from copy_router.params import add_builtin_parameters
from copy_router.rendering import Template

def test_rendering():
    template = Template("databases/{{database}}/{{table | remove:'public.'}}/ds={{ds}}/{{filename}}")
    parameters = add_builtin_parameters({})
    parameters['database'] = 'oltp'
    parameters['table'] = 'public.a_table'
    parameters['filename'] = 'some.parquet'
    parameters['ds'] = '2023-09-05'
    assert template.render(parameters) == 'databases/oltp/a_table/ds=2023-09-05/some.parquet'

def test_chained_filters():
    template = Template("{{table | remove:'public.' | upcase}}")
    assert template.render({'table': 'public.orders'}) == 'ORDERS'

def test_undefined_variable_renders_empty():
    assert Template('archive/{{missing}}/{{filename}}').render({'filename': 'f'}) == 'archive//f'

def test_template_is_reusable():
    template = Template('{{region}}/{{filename}}')
    assert template.render({'region': 'a', 'filename': '1'}) == 'a/1'
    assert template.render({'region': 'b', 'filename': '2'}) == 'b/2'

def test_invalid_template():
    with pytest.raises(TemplateCompileError):
        Template('{% bogus %}')

def test_render_error():
    template = Template('{{ table | no_such_filter }}')
    with pytest.raises(RenderError):
        template.render({'table': 'public.orders'})

def test_parameter_named_self():
    assert Template('{{self}}/{{filename}}').render({'self': 'a', 'filename': 'f'}) == 'a/f'
