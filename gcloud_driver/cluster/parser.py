"""Parsing of JSON responses into cluster models."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from gcloud_driver.cluster.model import Cluster
from gcloud_driver.errors import ParseFailure

_CLUSTER_LIST = TypeAdapter(list[Cluster])


class ResponseParser:
    """Stateless parser for ``--format=json`` output."""

    def parse_one(self, text: str) -> Cluster:
        """Parse a single cluster record.

        Raises:
            ParseFailure: If text is not valid JSON or not a cluster record
        """
        try:
            return Cluster.model_validate_json(text)
        except ValidationError as e:
            raise ParseFailure(f"Unexpected cluster response: {e}", text=text) from e

    def parse_many(self, text: str) -> list[Cluster]:
        """Parse a JSON array of cluster records.

        Raises:
            ParseFailure: If text is not valid JSON or not an array of clusters
        """
        try:
            return _CLUSTER_LIST.validate_json(text)
        except ValidationError as e:
            raise ParseFailure(f"Unexpected cluster list response: {e}", text=text) from e


_default_parser = ResponseParser()


def parse_cluster(text: str) -> Cluster:
    """Parse a single cluster record with the shared parser."""
    return _default_parser.parse_one(text)


def parse_clusters(text: str) -> list[Cluster]:
    """Parse a list of cluster records with the shared parser."""
    return _default_parser.parse_many(text)
