"""Fleet investor financial reporting."""
