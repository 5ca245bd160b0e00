# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

class CopyRouterError(Exception):
    """ Base class for every error raised by the copy router. """

class ConfigurationError(CopyRouterError):
    """ Function configuration is missing or invalid; raised before any event is processed. """

class PatternCompileError(ConfigurationError):
    pass

class TemplateCompileError(ConfigurationError):
    pass

class MalformedEvent(CopyRouterError):
    """ The invocation payload is neither an S3 notification nor an SQS batch of them. """

class RenderError(CopyRouterError):
    pass
