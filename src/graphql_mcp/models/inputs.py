"""Pydantic models for MCP tool input parameters.

These models are the input contracts advertised in ``tools/list`` and the
validators applied to ``tools/call`` arguments.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class IntrospectSchemaParams(BaseModel):
    """Parameters for introspectGraphQLSchema tool (none accepted)."""

    model_config = ConfigDict(extra="forbid")


class ExecuteOperationParams(BaseModel):
    """Parameters for executeGraphQLOperation tool."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: Annotated[
        str,
        Field(
            min_length=1,
            description="The GraphQL query string to execute.",
            examples=["query { __typename }"],
        ),
    ]
    variables: Annotated[
        Optional[Dict[str, Any]],
        Field(
            default=None,
            description="An optional object containing variables for the query.",
        ),
    ]
    operation_name: Annotated[
        Optional[str],
        Field(
            default=None,
            alias="operationName",
            description="An optional name for the operation, if the query contains multiple operations.",
        ),
    ]
