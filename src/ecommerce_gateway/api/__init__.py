"""HTTP API: app factory, route table, dependencies and the authorization gate."""
