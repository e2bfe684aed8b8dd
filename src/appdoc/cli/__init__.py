"""Application document generator command line tool."""
