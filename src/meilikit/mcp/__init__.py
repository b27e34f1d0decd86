"""MCP server exposing meilikit operations as tools."""
