# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import boto3
import os

from aws_lambda_powertools import Logger, Tracer
from copy_router.config import Config
from copy_router.pipeline import CopyRequest, process_event

tracer = Tracer()
logger = Logger()

s3 = boto3.client('s3')

# Pattern and template errors fail the cold start, before any event is accepted
config = Config.from_environ(os.environ)

@tracer.capture_method
def copy_object(request: CopyRequest):
    logger.debug('Sending a copy request for %s with %s to %s', request.destination_bucket, request.copy_source, request.destination_key)
    response = s3.copy_object(
        Bucket = request.destination_bucket,
        CopySource = request.copy_source,
        Key = request.destination_key
    )
    logger.debug('Copied object: %s', response.get('CopyObjectResult'))
    return response

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def lambda_handler(event, _):
    copied = process_event(event, config, copy_object)
    logger.info('Copied %d objects', len(copied))
    return {
        'copied': [
            { 'source': request.copy_source, 'bucket': request.destination_bucket, 'key': request.destination_key }
            for request in copied
        ]
    }
