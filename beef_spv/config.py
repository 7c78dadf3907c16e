"""
Configuration management for BEEF verification.
"""
import json
import os
from typing import Optional
from dataclasses import dataclass, asdict


@dataclass
class SPVConfig:
    """Verification limits."""
    max_ancestor_depth: int = 128
    verify_scripts: bool = True


@dataclass
class OracleConfig:
    """Merkle root oracle endpoint."""
    url: str = ""
    timeout: float = 10.0  # seconds
    auth_token: Optional[str] = None


@dataclass
class MonitoringConfig:
    """Monitoring configuration."""
    enabled: bool = False
    host: str = "127.0.0.1"
    port: int = 9090


@dataclass
class Config:
    """Main configuration."""
    spv: SPVConfig
    oracle: OracleConfig
    monitoring: MonitoringConfig

    @classmethod
    def default(cls) -> 'Config':
        """Create default configuration."""
        return cls(
            spv=SPVConfig(),
            oracle=OracleConfig(),
            monitoring=MonitoringConfig()
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        return cls(
            spv=SPVConfig(**data.get('spv', {})),
            oracle=OracleConfig(**data.get('oracle', {})),
            monitoring=MonitoringConfig(**data.get('monitoring', {}))
        )

    @classmethod
    def from_file(cls, path: str) -> 'Config':
        """Load configuration from JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_file(self, path: str):
        """Save configuration to JSON file."""
        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'spv': asdict(self.spv),
            'oracle': asdict(self.oracle),
            'monitoring': asdict(self.monitoring)
        }
