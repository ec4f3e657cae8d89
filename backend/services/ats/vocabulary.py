"""Fixed vocabularies and patterns used by the ATS checks and keyword matcher.

These sets are part of the scoring contract: changing any entry changes
scores, so they are module constants rather than settings.
"""

import re

# ---------------------------------------------------------------------------
# Bullet openers
# ---------------------------------------------------------------------------
ACTION_VERBS: frozenset[str] = frozenset({
    "achieved", "accelerated", "awarded", "advanced", "amplified", "boosted", "built",
    "created", "coordinated", "collaborated", "completed", "controlled", "converted",
    "decreased", "delivered", "developed", "designed", "driven", "doubled", "directed",
    "established", "expanded", "enhanced", "exceeded", "executed", "engineered",
    "founded", "focused", "generated", "guided", "grew", "headed", "improved",
    "increased", "initiated", "implemented", "innovated", "integrated", "introduced",
    "led", "managed", "maximized", "mentored", "minimized", "modernized", "negotiated",
    "optimized", "orchestrated", "organized", "outperformed", "planned", "produced",
    "promoted", "pioneered", "reduced", "resolved", "restructured", "revitalized",
    "saved", "secured", "spearheaded", "streamlined", "strengthened", "supervised",
    "surpassed", "targeted", "transformed", "trained", "upgraded", "utilized", "won",
})

# Iteration order matters for the "found" list shown to the user
CLICHES: tuple[str, ...] = (
    "hard worker", "team player", "motivated", "self-starter", "detail-oriented",
    "results-oriented", "think outside the box", "go-getter", "thought leader",
    "visionary", "guru", "ninja", "rockstar", "synergy", "value-add",
    "best of breed", "bottom line", "strategic thinker", "proven track record",
    "dynamic", "proactive", "perfectionist", "people person",
)

STOP_WORDS: frozenset[str] = frozenset({
    "and", "the", "is", "in", "at", "of", "to", "for", "with", "a", "an", "on", "by",
    "as", "from", "that", "this", "it", "be", "are", "was", "were", "or", "if", "but",
    "we", "you", "they", "their", "our", "your", "i", "me", "my",
})

FILLER_WORDS: frozenset[str] = frozenset({
    "very", "really", "basically", "actually", "just", "quite", "pretty", "somewhat",
    "maybe", "perhaps", "probably", "largely", "mostly", "kind", "sort",
})

# ---------------------------------------------------------------------------
# Keyword classification
# ---------------------------------------------------------------------------
RESPONSIBILITY_VERBS: frozenset[str] = frozenset({
    "build", "design", "develop", "deliver", "manage", "lead", "own", "drive",
    "optimize", "improve", "create", "implement", "execute", "coordinate",
    "collaborate", "analyze", "support", "maintain", "scale", "test", "deploy",
    "architect", "monitor", "automate",
})

COMMON_TOOLS: frozenset[str] = frozenset({
    # Languages & frameworks
    "sql", "python", "java", "javascript", "typescript", "react", "node", "nodejs",
    "webpack", "vite", "angular", "vue", "svelte", "nextjs", "express", "fastapi",
    "django", "flask", "spring", "dotnet", "graphql", "rest", "api", "redux", "mobx",
    "matlab", "r", "sas", "spss",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "git", "linux",
    "jenkins", "circleci", "github", "gitlab", "bitbucket", "microservices",
    "serverless", "lambda", "cloudformation", "ansible", "puppet", "chef",
    "prometheus", "grafana", "elasticsearch", "kibana", "nginx", "apache", "tomcat",
    # Testing
    "jest", "cypress", "playwright", "selenium", "postman", "swagger", "insomnia",
    "charles",
    # Data & ML
    "mongodb", "postgres", "mysql", "snowflake", "spark", "redis", "kafka",
    "pandas", "numpy", "tensorflow", "pytorch", "scikit-learn", "opencv", "rabbitmq",
    "celery", "airflow", "looker", "dbt", "fivetran", "stitch", "hadoop", "hive",
    "pig", "hbase", "cassandra", "dynamodb", "neo4j", "memcached",
    # Business & productivity
    "excel", "powerbi", "tableau", "jira", "figma", "salesforce", "powerpoint",
    "word", "outlook", "photoshop", "illustrator", "sketch", "adobexd", "invision",
    "slack", "teams", "zoom", "hubspot", "marketo", "dynamics", "sap", "oracle",
    "workday", "zendesk", "intercom", "segment", "amplitude", "mixpanel",
    # Observability & edge
    "varnish", "fastly", "cloudflare", "datadog", "newrelic", "splunk", "sumo",
    "pagerduty", "statuspage",
})

MULTI_WORD_TOOLS: tuple[str, ...] = (
    "machine learning", "deep learning", "natural language", "computer vision",
    "data science", "cloud computing", "continuous integration", "continuous deployment",
    "version control", "agile methodologies", "scrum master", "devops engineer",
)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
METRIC_RE = re.compile(
    r"(\d+%|\$\d+|€\d+|£\d+"
    r"|\d+\+?\s*(users|clients|customers|revenue|sales|people|staff|team|budget|hours|projects|tickets|pipelines)"
    r"|\d+(?:\.\d+)?\s*(k|m|b)\b"
    r"|\b\d+x\b)",
    re.IGNORECASE | re.ASCII,
)

PASSIVE_VOICE_RE = re.compile(
    r"\b(am|is|are|was|were|be|been|being)\s+\w+(ed|en)\b", re.IGNORECASE | re.ASCII
)

PAST_TENSE_RE = re.compile(
    r"\b(achieved|led|built|created|managed|improved|increased|reduced|delivered"
    r"|developed|designed|drove|launched)\b",
    re.ASCII,
)
PRESENT_TENSE_RE = re.compile(
    r"\b(manage|lead|build|create|drive|deliver|develop|design|optimize|collaborate"
    r"|coordinate)\b",
    re.ASCII,
)

# use with fullmatch
DATE_RE = re.compile(r"\d{4}(-\d{2})?", re.ASCII)

# ---------------------------------------------------------------------------
# Section headings an ATS recognises, per resume section
# ---------------------------------------------------------------------------
STANDARD_HEADINGS: dict[str, tuple[str, ...]] = {
    "summary": ("summary", "professional summary", "profile"),
    "work": ("work experience", "experience", "professional experience"),
    "education": ("education", "academic background"),
    "skills": ("skills", "technical skills", "core skills"),
    "projects": ("projects", "project experience"),
    "certificates": ("certifications", "certificates"),
    "languages": ("languages",),
    "publications": ("publications",),
    "awards": ("awards", "honors"),
}
