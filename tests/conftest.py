# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import os

from dataclasses import dataclass

import pytest

# copy_function.main reads its configuration at import time
os.environ.setdefault('POWERTOOLS_TRACE_DISABLED', 'true')
os.environ.setdefault('POWERTOOLS_SERVICE_NAME', 's3-copy-router')
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')
os.environ.setdefault('INPUT_PATTERN', 'path/:ignore/:database/:table/1/:filename')
os.environ.setdefault('OUTPUT_TEMPLATE', "databases/{{database}}/{{table | remove:'public.'}}/ds={{ds}}/{{filename}}")

SOURCE_KEY = 'path/testing-2023-08-18-07-05-df7d7bcc-3160-50da-8c4c-26952b11a4c/testdb/public.test_table/1/foobar.snappy.parquet'

def s3_record(bucket, key):
    obj = { 'size': 1024, 'eTag': '0123456789abcdef0123456789abcdef' }
    if key is not None:
        obj['key'] = key
    return {
        'eventVersion': '2.0',
        'eventSource': 'aws:s3',
        'awsRegion': 'us-east-1',
        'eventTime': '1970-01-01T00:00:00.000Z',
        'eventName': 'ObjectCreated:Put',
        's3': {
            's3SchemaVersion': '1.0',
            'configurationId': 'testConfigRule',
            'bucket': { 'name': bucket, 'arn': f'arn:aws:s3:::{bucket}' },
            'object': obj
        }
    }

def s3_event(*objects):
    """ Builds an S3 notification from (bucket, key) pairs. """
    return { 'Records': [s3_record(bucket, key) for bucket, key in objects] }

def sqs_event(*bodies):
    """ Wraps each body (a dict is JSON encoded, a str used as is) in an SQS record. """
    return {
        'Records': [
            {
                'messageId': f'message-{i}',
                'receiptHandle': 'handle',
                'body': body if isinstance(body, str) else json.dumps(body),
                'eventSource': 'aws:sqs',
                'awsRegion': 'us-east-1'
            }
            for i, body in enumerate(bodies)
        ]
    }

@dataclass
class LambdaContext:
    function_name: str = 's3-copy-router'
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = 'arn:aws:lambda:us-east-1:123456789012:function:s3-copy-router'
    aws_request_id: str = 'da658bd3-2d6f-4e7b-8ec2-937234644fdc'

@pytest.fixture
def lambda_context():
    return LambdaContext()
