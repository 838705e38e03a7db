def isoformat(value):
    """Datas vêm como datetime (postgres/mysql) ou texto (sqlite)"""
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
