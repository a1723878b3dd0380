"""SearchStax CLI: reconcile managed Solr deployments against the SearchStax API."""

__version__ = "0.1.0"
