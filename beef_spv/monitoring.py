# beef_spv/monitoring.py
import errno
import psutil
from prometheus_client import Counter, Gauge, Histogram, CollectorRegistry
from prometheus_client.exposition import make_wsgi_app
from wsgiref.simple_server import make_server, WSGIServer
from socketserver import ThreadingMixIn
import threading
import logging

from beef_spv.config import MonitoringConfig

logger = logging.getLogger(__name__)


# Threaded WSGI server for the Prometheus metrics
class ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    """A WSGI server that handles scrapes off the verification path."""
    allow_reuse_address = True
    daemon_threads = True


class SPVMonitor:
    def __init__(self, host="127.0.0.1", port=9090):
        self.host = host
        self.port = port
        self.server = None
        self.thread = None

        # Isolated registry so several monitors can live in one process
        self.registry = CollectorRegistry()

        self.verifications = Counter('beef_verifications_total', 'BEEF envelopes verified, by outcome',
                                     ['result'], registry=self.registry)
        self.latency = Histogram('beef_verification_latency_seconds', 'Time to verify one envelope',
                                 registry=self.registry)
        self.oracle_requests = Counter('beef_oracle_requests_total', 'Merkle root oracle calls, by outcome',
                                       ['status'], registry=self.registry)
        self.cpu_usage = Gauge('system_cpu_percent', 'Current CPU usage percent', registry=self.registry)
        self.memory_usage = Gauge('system_memory_percent', 'Current memory usage percent', registry=self.registry)

    @classmethod
    def from_config(cls, config: MonitoringConfig) -> 'SPVMonitor':
        return cls(host=config.host, port=config.port)

    def start_server(self):
        """
        Serves the registry from a daemon thread.

        Metrics never block a verification run: when the configured port is
        taken the server moves to a free port, and `self.port` reports it.
        """
        app = make_wsgi_app(self.registry)
        try:
            self.server = make_server(self.host, self.port, app, ThreadingWSGIServer)
        except OSError as e:
            if e.errno != errno.EADDRINUSE:
                raise
            logger.warning(f"Port {self.port} in use, serving metrics on a free port instead")
            self.server = make_server(self.host, 0, app, ThreadingWSGIServer)
        self.port = self.server.server_port

        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        logger.info(f"Prometheus server started on http://{self.host}:{self.port}")

    def stop_server(self):
        """Stops the HTTP server."""
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None
            logger.info("Prometheus server stopped.")

    def update(self):
        self.cpu_usage.set(psutil.cpu_percent())
        self.memory_usage.set(psutil.virtual_memory().percent)

    def record_verification(self, result: str, latency: float):
        self.verifications.labels(result=result).inc()
        self.latency.observe(latency)

    def record_oracle_request(self, status: str):
        self.oracle_requests.labels(status=status).inc()

    def sample(self, name: str, labels: dict = None) -> float:
        """Current value of a metric sample, 0.0 when it has not been recorded."""
        value = self.registry.get_sample_value(name, labels or {})
        return value if value is not None else 0.0
