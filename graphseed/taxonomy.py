"""Canonical taxonomy — node type tags, relationship labels, parent requirements.

Mirrors the generated taxonomy the graph loader is built against. Values are
lowercase snake-case for node types and upper snake-case for relationships.
"""

from __future__ import annotations

from enum import StrEnum

TAXONOMY_VERSION = "0.1.0"


class NodeType(StrEnum):
    # Execution
    MISSION = "mission"
    AGENT_RUN = "agent_run"
    TOOL_EXECUTION = "tool_execution"
    LLM_CALL = "llm_call"
    INTELLIGENCE = "intelligence"

    # Asset discovery
    DOMAIN = "domain"
    SUBDOMAIN = "subdomain"
    HOST = "host"
    PORT = "port"
    SERVICE = "service"
    CERTIFICATE = "certificate"
    TECHNOLOGY = "technology"
    DNS_RECORD = "dns_record"

    # Network infrastructure
    FIREWALL = "firewall"
    FIREWALL_RULE = "firewall_rule"
    ROUTER = "router"
    ROUTE = "route"
    LOAD_BALANCER = "load_balancer"
    PROXY = "proxy"
    VPN = "vpn"
    NETWORK = "network"
    VLAN = "vlan"
    NETWORK_ZONE = "network_zone"
    NETWORK_ACL = "network_acl"
    NAT_GATEWAY = "nat_gateway"
    BGP_PEER = "bgp_peer"
    NETWORK_INTERFACE = "network_interface"

    # Web / API
    API = "api"
    ENDPOINT = "endpoint"
    API_ENDPOINT = "api_endpoint"
    PARAMETER = "parameter"
    HEADER = "header"
    COOKIE = "cookie"
    FORM = "form"
    FORM_FIELD = "form_field"
    WEBSOCKET = "websocket"
    GRAPHQL_SCHEMA = "graphql_schema"
    GRAPHQL_QUERY = "graphql_query"
    GRAPHQL_MUTATION = "graphql_mutation"
    REST_RESOURCE = "rest_resource"
    HTTP_METHOD = "http_method"
    CONTENT_TYPE = "content_type"
    CORS_POLICY = "cors_policy"
    RATE_LIMIT = "rate_limit"
    REQUEST_BODY = "request_body"

    # Identity & access
    USER = "user"
    GROUP = "group"
    ROLE = "role"
    POLICY = "policy"
    PERMISSION = "permission"
    CREDENTIAL = "credential"
    API_KEY = "api_key"
    TOKEN = "token"
    OAUTH_CLIENT = "oauth_client"
    OAUTH_SCOPE = "oauth_scope"
    SAML_PROVIDER = "saml_provider"
    IDENTITY_PROVIDER = "identity_provider"
    SERVICE_ACCOUNT = "service_account"
    ACCESS_KEY = "access_key"
    MFA_DEVICE = "mfa_device"
    SESSION = "session"

    # AI / LLM
    LLM = "llm"
    LLM_DEPLOYMENT = "llm_deployment"
    LLM_RESPONSE = "llm_response"
    TOKEN_USAGE = "token_usage"
    PROMPT = "prompt"
    SYSTEM_PROMPT = "system_prompt"
    GUARDRAIL = "guardrail"
    CONTENT_FILTER = "content_filter"
    EMBEDDING_MODEL = "embedding_model"
    MODEL_REGISTRY = "model_registry"
    MODEL_VERSION = "model_version"
    INFERENCE_ENDPOINT = "inference_endpoint"
    BATCH_JOB = "batch_job"
    FINE_TUNE = "fine_tune"
    TRAINING_RUN = "training_run"
    DATASET = "dataset"

    # AI agents
    AI_AGENT = "ai_agent"
    AGENT_CONFIG = "agent_config"
    AGENT_MEMORY = "agent_memory"
    AGENT_TOOL = "agent_tool"
    AGENT_TASK = "agent_task"
    AGENT_ROLE = "agent_role"
    AGENT_LOOP = "agent_loop"
    AGENT_ARTIFACT = "agent_artifact"
    CHAIN = "chain"
    WORKFLOW = "workflow"
    CREW = "crew"
    TOOL_CALL = "tool_call"
    REASONING_STEP = "reasoning_step"
    MEMORY_ENTRY = "memory_entry"
    PLANNING_STEP = "planning_step"

    # MCP
    MCP_SERVER = "mcp_server"
    MCP_CLIENT = "mcp_client"
    MCP_TRANSPORT = "mcp_transport"
    MCP_CAPABILITY = "mcp_capability"
    MCP_TOOL = "mcp_tool"
    MCP_RESOURCE = "mcp_resource"
    MCP_PROMPT = "mcp_prompt"
    MCP_SAMPLING = "mcp_sampling"
    MCP_ROOTS = "mcp_roots"

    # RAG
    VECTOR_STORE = "vector_store"
    VECTOR_INDEX = "vector_index"
    DOCUMENT = "document"
    DOCUMENT_CHUNK = "document_chunk"
    EMBEDDING = "embedding"
    KNOWLEDGE_BASE = "knowledge_base"
    RETRIEVER = "retriever"
    RETRIEVAL_RESULT = "retrieval_result"
    RAG_PIPELINE = "rag_pipeline"
    RERANKER = "reranker"
    CHUNKING_STRATEGY = "chunking_strategy"

    # Data
    DATABASE = "database"
    TABLE = "table"
    COLUMN = "column"
    INDEX = "index"
    VIEW = "view"
    STORED_PROCEDURE = "stored_procedure"
    TRIGGER = "trigger"
    STORAGE_BUCKET = "storage_bucket"
    FILE = "file"
    OBJECT = "object"
    QUEUE = "queue"
    TOPIC = "topic"
    STREAM = "stream"
    CACHE = "cache"
    SCHEMA = "schema"
    DATA_PIPELINE = "data_pipeline"

    # Containers
    CONTAINER = "container"
    CONTAINER_IMAGE = "container_image"
    CONTAINER_REGISTRY = "container_registry"
    DOCKERFILE = "dockerfile"

    # Kubernetes
    K8S_CLUSTER = "k8s_cluster"
    K8S_NAMESPACE = "k8s_namespace"
    K8S_POD = "k8s_pod"
    K8S_DEPLOYMENT = "k8s_deployment"
    K8S_SERVICE = "k8s_service"
    K8S_INGRESS = "k8s_ingress"
    K8S_CONFIG_MAP = "k8s_config_map"
    K8S_SECRET = "k8s_secret"
    K8S_PV = "k8s_pv"
    K8S_PVC = "k8s_pvc"
    K8S_STATEFUL_SET = "k8s_stateful_set"
    K8S_DAEMON_SET = "k8s_daemon_set"
    K8S_JOB = "k8s_job"
    K8S_CRON_JOB = "k8s_cron_job"
    K8S_SERVICE_ACCOUNT = "k8s_service_account"
    K8S_ROLE = "k8s_role"
    K8S_ROLE_BINDING = "k8s_role_binding"
    K8S_CLUSTER_ROLE = "k8s_cluster_role"
    K8S_CLUSTER_ROLE_BINDING = "k8s_cluster_role_binding"
    K8S_NETWORK_POLICY = "k8s_network_policy"
    K8S_LIMIT_RANGE = "k8s_limit_range"
    K8S_RESOURCE_QUOTA = "k8s_resource_quota"

    # Cloud
    CLOUD_ASSET = "cloud_asset"
    CLOUD_ACCOUNT = "cloud_account"
    CLOUD_REGION = "cloud_region"
    CLOUD_VPC = "cloud_vpc"
    CLOUD_SUBNET = "cloud_subnet"
    CLOUD_SECURITY_GROUP = "cloud_security_group"
    CLOUD_INSTANCE = "cloud_instance"
    CLOUD_FUNCTION = "cloud_function"
    CLOUD_STORAGE = "cloud_storage"
    CLOUD_DATABASE = "cloud_database"
    CLOUD_QUEUE = "cloud_queue"
    CLOUD_API_GATEWAY = "cloud_api_gateway"
    CLOUD_CDN = "cloud_cdn"
    CLOUD_DNS_ZONE = "cloud_dns_zone"
    CLOUD_CERTIFICATE = "cloud_certificate"
    CLOUD_KMS_KEY = "cloud_kms_key"
    CLOUD_IAM_ROLE = "cloud_iam_role"
    CLOUD_IAM_POLICY = "cloud_iam_policy"
    CLOUD_TRAIL = "cloud_trail"
    CLOUD_METRIC = "cloud_metric"
    CLOUD_ALARM = "cloud_alarm"

    # Security findings
    FINDING = "finding"
    EVIDENCE = "evidence"
    MITIGATION = "mitigation"
    TACTIC = "tactic"
    TECHNIQUE = "technique"


class RelationType(StrEnum):
    HAS_SUBDOMAIN = "HAS_SUBDOMAIN"      # DOMAIN → SUBDOMAIN
    RESOLVES_TO = "RESOLVES_TO"          # SUBDOMAIN → HOST
    HAS_PORT = "HAS_PORT"                # HOST → PORT
    RUNS_SERVICE = "RUNS_SERVICE"        # PORT → SERVICE
    HAS_ENDPOINT = "HAS_ENDPOINT"        # SERVICE → ENDPOINT
    USES_TECHNOLOGY = "USES_TECHNOLOGY"
    SERVES_CERTIFICATE = "SERVES_CERTIFICATE"
    HOSTS = "HOSTS"
    AFFECTS = "AFFECTS"
    HAS_EVIDENCE = "HAS_EVIDENCE"        # FINDING → EVIDENCE
    USES_TECHNIQUE = "USES_TECHNIQUE"
    EXPLOITS = "EXPLOITS"
    MITIGATES = "MITIGATES"
    LEADS_TO = "LEADS_TO"
    SIMILAR_TO = "SIMILAR_TO"
    PART_OF = "PART_OF"
    BELONGS_TO = "BELONGS_TO"            # default for custom entities
    EXECUTED_BY = "EXECUTED_BY"
    DISCOVERED = "DISCOVERED"
    PRODUCED = "PRODUCED"
    MADE_CALL = "MADE_CALL"


# Types that must declare a parent before storage. Every other NodeType is a
# root and may be stored directly.
CHILD_TYPES: frozenset[NodeType] = frozenset({
    # Asset hierarchy
    NodeType.SUBDOMAIN,
    NodeType.PORT,
    NodeType.SERVICE,
    # Web / API
    NodeType.ENDPOINT,
    NodeType.API_ENDPOINT,
    NodeType.PARAMETER,
    NodeType.HEADER,
    NodeType.COOKIE,
    NodeType.FORM,
    NodeType.FORM_FIELD,
    NodeType.WEBSOCKET,
    NodeType.GRAPHQL_SCHEMA,
    NodeType.GRAPHQL_QUERY,
    NodeType.GRAPHQL_MUTATION,
    NodeType.REST_RESOURCE,
    NodeType.HTTP_METHOD,
    NodeType.CONTENT_TYPE,
    NodeType.CORS_POLICY,
    NodeType.RATE_LIMIT,
    NodeType.REQUEST_BODY,
    # Identity & access
    NodeType.PERMISSION,
    NodeType.OAUTH_SCOPE,
    # AI / LLM
    NodeType.LLM_RESPONSE,
    NodeType.TOKEN_USAGE,
    NodeType.FINE_TUNE,
    NodeType.MODEL_VERSION,
    NodeType.BATCH_JOB,
    NodeType.TRAINING_RUN,
    # AI agents
    NodeType.TOOL_CALL,
    NodeType.REASONING_STEP,
    NodeType.MEMORY_ENTRY,
    NodeType.PLANNING_STEP,
    # MCP
    NodeType.MCP_TOOL,
    NodeType.MCP_RESOURCE,
    NodeType.MCP_PROMPT,
    NodeType.MCP_SAMPLING,
    NodeType.MCP_ROOTS,
    # RAG
    NodeType.DOCUMENT_CHUNK,
    NodeType.EMBEDDING,
    NodeType.RETRIEVAL_RESULT,
    # Data
    NodeType.TABLE,
    NodeType.COLUMN,
    NodeType.INDEX,
    NodeType.VIEW,
    NodeType.STORED_PROCEDURE,
    NodeType.TRIGGER,
    NodeType.FILE,
    NodeType.OBJECT,
    # Kubernetes
    NodeType.K8S_POD,
    NodeType.K8S_DEPLOYMENT,
    NodeType.K8S_SERVICE,
    NodeType.K8S_INGRESS,
    NodeType.K8S_PVC,
    NodeType.K8S_STATEFUL_SET,
    NodeType.K8S_DAEMON_SET,
    NodeType.K8S_JOB,
    NodeType.K8S_CRON_JOB,
    NodeType.K8S_ROLE_BINDING,
    NodeType.K8S_CLUSTER_ROLE_BINDING,
    # Cloud / network
    NodeType.CLOUD_SUBNET,
    NodeType.ROUTE,
    NodeType.FIREWALL_RULE,
})

ROOT_TYPES: frozenset[NodeType] = frozenset(NodeType) - CHILD_TYPES
