import datetime as dt


def utcnow() -> dt.datetime:
    """datetime naive en UTC, igual que lo guardan las columnas."""
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


def normalize_dt(value):
    """Normaliza a datetime naive en UTC."""
    if isinstance(value, dt.datetime):
        # Si viene aware, pásalo a UTC y quita tzinfo; si ya es naive, asume UTC
        return value.astimezone(dt.timezone.utc).replace(tzinfo=None) if value.tzinfo else value

    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time.min)

    if isinstance(value, str):
        # Acepta ISO con 'Z' o con offset
        s = value.replace("Z", "+00:00")
        try:
            parsed = dt.datetime.fromisoformat(s)
        except ValueError:
            # fallback a YYYY-MM-DD
            parsed = dt.datetime.strptime(value, "%Y-%m-%d")
        return normalize_dt(parsed)

    # Otros tipos se dejan a pydantic para que reporte el error
    return value


def months_between(start: dt.date, end: dt.date) -> int:
    """Diferencia en meses de calendario (ignora el día del mes)."""
    return (end.year - start.year) * 12 + (end.month - start.month)
