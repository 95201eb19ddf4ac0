from prometheus_client import Counter, Histogram, Gauge, generate_latest
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Метрики сессии и доступа
login_attempts_total = Counter('login_attempts_total', 'Login attempts', ['outcome'])
guard_denials_total = Counter('guard_denials_total', 'Navigations denied by a guard', ['guard'])
active_session = Gauge('active_session', '1 while a user is logged in')

def metrics_endpoint():
    """Endpoint для Prometheus метрик"""
    return Response(content=generate_latest(), media_type="text/plain")
