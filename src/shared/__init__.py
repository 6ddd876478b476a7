"""
Shared code for the Lambda functions.

Every function zip built by ``scripts/build.py`` ships this package next to its
``lambda_function.py``:

- utils: request normalization, response building, observability collaborators
- models: response payloads and environment configuration
- dal: the fixed users catalog
"""

__version__ = "1.0.0"
