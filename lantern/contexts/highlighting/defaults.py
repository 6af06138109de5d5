"""
Built-in highlight dictionaries.

Used when no dictionary file is configured (see config_resolver). Keys are
lowercase; lookups lowercase the matched text before indexing.
"""

# Design patterns, methodologies and techniques (description shown as tooltip)
DESIGN_PATTERNS = {
    # Deployment and migration
    "shadow table": "Safe migration pattern - write to both tables during transition",
    "blue-green deployment": "Zero-downtime deployment with instant rollback",
    "canary release": "Gradual rollout to subset of users first",
    "feature flag": "Toggle features without deployment",
    "circuit breaker": "Prevent cascade failures in distributed systems",
    "bulkhead pattern": "Isolate failures to prevent system-wide impact",
    "saga pattern": "Manage distributed transactions across services",
    "cqrs": "Separate read and write models for scalability",
    "event sourcing": "Store state changes as sequence of events",
    "strangler fig": "Gradually replace legacy system",
    # Architecture
    "domain-driven design": "Model software around business domains",
    "hexagonal architecture": "Ports and adapters for testability",
    "clean architecture": "Dependency rule - inner layers don't know outer",
    "event-driven": "Async communication via events",
    "pub-sub": "Publisher-subscriber messaging pattern",
    "api gateway": "Single entry point for microservices",
    "service mesh": "Infrastructure layer for service-to-service communication",
    "sidecar pattern": "Deploy helper container alongside main container",
    # Data
    "write-ahead log": "Durability pattern for databases",
    "read replica": "Scale reads by replicating data",
    "sharding": "Horizontal partitioning for scale",
    "denormalization": "Trade storage for query performance",
    "materialized view": "Pre-computed query results",
    "change data capture": "Track and propagate data changes",
    "eventual consistency": "Data converges over time, not instantly",
    # Testing and quality
    "test-driven development": "Write tests before code",
    "behavior-driven development": "Tests in business language",
    "contract testing": "Verify API contracts between services",
    "chaos engineering": "Deliberately inject failures to test resilience",
    "load shedding": "Gracefully degrade under heavy load",
    # Process
    "trunk-based development": "Short-lived branches, frequent integration",
    "gitflow": "Branch model with develop/release/hotfix",
    "pair programming": "Two developers, one workstation",
    "mob programming": "Whole team works together on one task",
    "blameless postmortem": "Learn from failures without blame",
}

# Technical terms with definitions (glossary tooltip)
TECHNICAL_TERMS = {
    "api": "Application Programming Interface",
    "aws": "Amazon Web Services",
    "gcp": "Google Cloud Platform",
    "azure": "Microsoft Azure",
    "ci/cd": "Continuous Integration/Deployment",
    "docker": "Container platform",
    "kubernetes": "Container orchestration",
    "k8s": "Kubernetes",
    "react": "Frontend framework",
    "node": "JavaScript runtime",
    "python": "Programming language",
    "golang": "Go programming language",
    "rust": "Systems programming language",
    "sql": "Database query language",
    "nosql": "Non-relational databases",
    "postgresql": "Relational database",
    "mysql": "Relational database",
    "mongodb": "Document database",
    "redis": "In-memory cache",
    "kafka": "Distributed streaming platform",
    "rabbitmq": "Message broker",
    "elasticsearch": "Search and analytics engine",
    "graphql": "API query language",
    "grpc": "High-performance RPC framework",
    "rest": "API architecture style",
    "microservices": "Distributed architecture",
    "monolith": "Single-deployment architecture",
    "terraform": "Infrastructure as code",
    "ansible": "Configuration management",
    "jenkins": "CI/CD automation",
    "github actions": "CI/CD platform",
    "agile": "Iterative development",
    "scrum": "Agile framework",
    "kanban": "Visual workflow management",
    "sprint": "Time-boxed iteration",
    "mvp": "Minimum Viable Product",
    "kpi": "Key Performance Indicator",
    "okr": "Objectives and Key Results",
    "saas": "Software as a Service",
    "paas": "Platform as a Service",
    "iaas": "Infrastructure as a Service",
    "latency": "Response time delay",
    "throughput": "Processing capacity",
    "scalability": "Growth handling ability",
    "availability": "Uptime reliability",
    "sla": "Service Level Agreement",
    "slo": "Service Level Objective",
    "sli": "Service Level Indicator",
    "p99": "99th percentile latency",
    "rps": "Requests per second",
    "qps": "Queries per second",
}

# Verbs that show ownership of the work
ACTION_VERBS = [
    "led", "built", "designed", "implemented", "created", "developed",
    "architected", "optimized", "refactored", "deployed", "launched",
    "managed", "owned", "drove", "spearheaded", "established",
    "reduced", "increased", "improved", "eliminated", "automated",
    "migrated", "scaled", "integrated", "streamlined", "transformed",
]

# Words to stress when speaking a section aloud, keyed by section
DELIVERY_CUES = {
    "situation": {"emphasis": ["critical", "urgent", "blocking", "legacy", "outage", "risk"]},
    "context": {"emphasis": ["critical", "urgent", "legacy", "risk"]},
    "task": {"emphasis": ["responsible", "goal", "deadline", "owner", "needed"]},
    "obstacles": {"emphasis": ["blocked", "constraint", "conflict", "unclear"]},
    "action": {"emphasis": ["I", "decided", "prioritized", "proposed", "negotiated", "led"]},
    "result": {"emphasis": ["impact", "saved", "shipped", "adopted", "revenue", "faster"]},
    "outcome": {"emphasis": ["impact", "adopted", "revenue"]},
    "learning": {"emphasis": ["learned", "next time", "differently", "now"]},
}
