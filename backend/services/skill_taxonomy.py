"""Static skill taxonomy: aliases, stack/role clusters, skill graph, tool set.

All tables are read-only and built once at import time. Extraction and
matching code look skills up here instead of carrying their own literals.
"""

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Alias table: lowercase alias -> canonical skill name
# ---------------------------------------------------------------------------
_ALIASES: dict[str, str] = {
    # JavaScript ecosystem
    "js": "JavaScript", "javascript": "JavaScript", "ecmascript": "JavaScript",
    "es6": "JavaScript", "es2015": "JavaScript",
    "typescript": "TypeScript", "ts": "TypeScript",
    "node": "Node.js", "nodejs": "Node.js", "node.js": "Node.js", "node js": "Node.js",
    "react": "React", "reactjs": "React", "react.js": "React", "react js": "React",
    "vue": "Vue.js", "vuejs": "Vue.js", "vue.js": "Vue.js", "vue js": "Vue.js", "vue 3": "Vue.js",
    "angular": "Angular", "angularjs": "Angular", "angular.js": "Angular", "angular js": "Angular",
    "nextjs": "Next.js", "next.js": "Next.js", "next js": "Next.js",
    "nuxt": "Nuxt.js", "nuxtjs": "Nuxt.js", "nuxt.js": "Nuxt.js",
    "express": "Express.js", "expressjs": "Express.js", "express.js": "Express.js",
    "nestjs": "NestJS", "nest.js": "NestJS", "nest js": "NestJS",
    "svelte": "Svelte", "sveltejs": "Svelte", "sveltekit": "SvelteKit",
    "jquery": "jQuery", "redux": "Redux", "webpack": "Webpack", "vite": "Vite",
    "deno": "Deno",
    # Python ecosystem
    "python": "Python", "python3": "Python", "python 3": "Python", "py": "Python",
    "django": "Django", "flask": "Flask", "fastapi": "FastAPI", "fast api": "FastAPI",
    "pandas": "Pandas", "numpy": "NumPy", "scipy": "SciPy",
    "pytorch": "PyTorch", "torch": "PyTorch", "tensorflow": "TensorFlow",
    "scikit-learn": "Scikit-learn", "sklearn": "Scikit-learn", "scikit learn": "Scikit-learn",
    "keras": "Keras", "matplotlib": "Matplotlib",
    # Java / JVM
    "java": "Java", "spring": "Spring", "spring boot": "Spring Boot", "springboot": "Spring Boot",
    "kotlin": "Kotlin", "scala": "Scala", "gradle": "Gradle", "maven": "Maven",
    # Systems languages
    "rust": "Rust", "rustlang": "Rust", "go": "Go", "golang": "Go",
    "c++": "C++", "cpp": "C++", "c/c++": "C/C++", "c": "C",
    "c#": "C#", "csharp": "C#", "c sharp": "C#",
    # .NET
    ".net": ".NET", "dotnet": ".NET", "dot net": ".NET", ".net core": ".NET",
    "asp.net": "ASP.NET", "aspnet": "ASP.NET",
    # Ruby / PHP
    "ruby": "Ruby", "rails": "Ruby on Rails", "ruby on rails": "Ruby on Rails", "ror": "Ruby on Rails",
    "php": "PHP", "laravel": "Laravel", "symfony": "Symfony", "wordpress": "WordPress",
    # Mobile
    "react native": "React Native", "react-native": "React Native", "reactnative": "React Native",
    "swift": "Swift", "swiftui": "SwiftUI", "objective-c": "Objective-C", "objc": "Objective-C",
    "ios": "iOS", "android": "Android", "flutter": "Flutter", "dart": "Dart",
    # Databases
    "sql": "SQL", "mysql": "MySQL", "postgres": "PostgreSQL", "postgresql": "PostgreSQL",
    "mongo": "MongoDB", "mongodb": "MongoDB", "redis": "Redis",
    "elasticsearch": "Elasticsearch", "dynamodb": "DynamoDB", "dynamo": "DynamoDB",
    "cassandra": "Cassandra", "sqlite": "SQLite", "mariadb": "MariaDB",
    "mssql": "SQL Server", "sql server": "SQL Server", "microsoft sql server": "SQL Server",
    "oracle db": "Oracle DB", "oracle database": "Oracle DB", "nosql": "NoSQL",
    # Cloud & DevOps
    "aws": "AWS", "amazon web services": "AWS",
    "gcp": "GCP", "google cloud": "GCP", "google cloud platform": "GCP",
    "azure": "Azure", "microsoft azure": "Azure",
    "docker": "Docker", "kubernetes": "Kubernetes", "k8s": "Kubernetes",
    "terraform": "Terraform", "ansible": "Ansible", "jenkins": "Jenkins",
    "github actions": "GitHub Actions", "gh actions": "GitHub Actions",
    "gitlab ci": "GitLab CI", "gitlab ci/cd": "GitLab CI",
    "circleci": "CircleCI", "circle ci": "CircleCI",
    "ci/cd": "CI/CD", "cicd": "CI/CD", "devops": "DevOps",
    "nginx": "Nginx", "linux": "Linux", "bash": "Bash",
    "shell": "Shell", "shell scripting": "Shell",
    "prometheus": "Prometheus", "grafana": "Grafana", "datadog": "Datadog",
    "cloudformation": "CloudFormation", "aws cloudformation": "CloudFormation",
    "serverless": "Serverless", "lambda": "AWS Lambda", "aws lambda": "AWS Lambda",
    # Data & ML
    "machine learning": "Machine Learning", "ml": "Machine Learning",
    "deep learning": "Deep Learning", "dl": "Deep Learning",
    "artificial intelligence": "AI", "ai": "AI",
    "nlp": "NLP", "natural language processing": "NLP", "computer vision": "Computer Vision",
    "data science": "Data Science", "data engineering": "Data Engineering",
    "data analysis": "Data Analysis",
    "spark": "Apache Spark", "apache spark": "Apache Spark",
    "hadoop": "Hadoop", "apache hadoop": "Hadoop",
    "kafka": "Apache Kafka", "apache kafka": "Apache Kafka",
    "airflow": "Apache Airflow", "apache airflow": "Apache Airflow",
    "tableau": "Tableau", "power bi": "Power BI", "powerbi": "Power BI", "looker": "Looker",
    "dbt": "dbt", "snowflake": "Snowflake", "bigquery": "BigQuery", "big query": "BigQuery",
    "redshift": "Redshift",
    # Frontend / CSS
    "html": "HTML", "html5": "HTML", "css": "CSS", "css3": "CSS",
    "sass": "Sass", "scss": "Sass", "less": "Less",
    "tailwind": "Tailwind CSS", "tailwindcss": "Tailwind CSS", "tailwind css": "Tailwind CSS",
    "bootstrap": "Bootstrap", "material ui": "Material UI", "mui": "Material UI",
    "styled-components": "Styled Components", "styled components": "Styled Components",
    "storybook": "Storybook",
    # Testing
    "jest": "Jest", "mocha": "Mocha", "cypress": "Cypress", "playwright": "Playwright",
    "selenium": "Selenium", "pytest": "pytest", "junit": "JUnit", "rspec": "RSpec",
    "vitest": "Vitest", "testing library": "Testing Library",
    "react testing library": "Testing Library",
    # APIs & protocols
    "rest": "REST", "restful": "REST", "rest api": "REST", "restful api": "REST",
    "graphql": "GraphQL", "gql": "GraphQL", "grpc": "gRPC",
    "websocket": "WebSocket", "websockets": "WebSocket",
    # Version control & tooling
    "git": "Git", "github": "GitHub", "gitlab": "GitLab", "bitbucket": "Bitbucket",
    "jira": "Jira", "confluence": "Confluence", "trello": "Trello", "notion": "Notion",
    "slack": "Slack", "postman": "Postman", "vs code": "VS Code", "vscode": "VS Code",
    "intellij": "IntelliJ", "vim": "Vim", "npm": "npm", "yarn": "Yarn", "pnpm": "pnpm",
    "eslint": "ESLint", "prettier": "Prettier", "asana": "Asana",
    "microsoft office": "Microsoft Office", "ms office": "Microsoft Office",
    "excel": "Microsoft Office", "quickbooks": "QuickBooks", "salesforce": "Salesforce",
    "zoom": "Zoom", "google workspace": "Google Workspace",
    # Design & UX
    "figma": "Figma", "sketch": "Sketch", "adobe xd": "Adobe XD",
    "ux": "UX Design", "ux design": "UX Design", "ui": "UI Design", "ui design": "UI Design",
    "ui/ux": "UI/UX Design", "ux/ui": "UI/UX Design",
    # Security
    "cybersecurity": "Cybersecurity", "cyber security": "Cybersecurity", "infosec": "Cybersecurity",
    "owasp": "OWASP", "penetration testing": "Penetration Testing", "pentest": "Penetration Testing",
    # Methodologies
    "agile": "Agile", "scrum": "Scrum", "kanban": "Kanban",
    # Other languages & platforms
    "neo4j": "Neo4j", "rabbitmq": "RabbitMQ", "rabbit mq": "RabbitMQ",
    "r": "R", "rlang": "R", "matlab": "MATLAB", "sas": "SAS",
    "solidity": "Solidity", "web3": "Web3", "blockchain": "Blockchain",
    "elixir": "Elixir", "erlang": "Erlang", "haskell": "Haskell", "clojure": "Clojure",
    "perl": "Perl", "lua": "Lua", "unity": "Unity", "unreal": "Unreal Engine",
    "unreal engine": "Unreal Engine",
    # Hospitality & food service
    "dishwasher": "Dishwashing", "dishwashing": "Dishwashing",
    "kitchen staff": "Kitchen Staff", "kitchen help": "Kitchen Staff",
    "line cook": "Line Cook", "line cooking": "Line Cook",
    "prep cook": "Prep Cook", "preparation cook": "Prep Cook",
    "waiter": "Server", "waitress": "Server", "wait staff": "Server",
    "bartender": "Bartender", "hostess": "Host", "busser": "Busser",
    "food prep": "Food Preparation", "food preparation": "Food Preparation",
    "culinary": "Culinary Arts", "culinary arts": "Culinary Arts",
    "barista": "Barista", "housekeeping": "Housekeeping", "room attendant": "Housekeeping",
    "sanitation": "Sanitation", "food safety": "Food Safety", "servsafe": "Food Safety",
    "haccp": "Food Safety", "pos": "POS Systems", "pos systems": "POS Systems",
    "cash handling": "Cash Handling", "cashier": "Cashier",
    # Trades & construction
    "electrician": "Electrical", "electrical": "Electrical", "electrical work": "Electrical",
    "plumbing": "Plumbing", "plumber": "Plumbing",
    "carpentry": "Carpentry", "carpenter": "Carpentry",
    "welding": "Welding", "welder": "Welding", "mig welding": "Welding", "tig welding": "Welding",
    "hvac": "HVAC", "air conditioning": "HVAC",
    "roofing": "Roofing", "roofer": "Roofing", "masonry": "Masonry", "bricklaying": "Masonry",
    "landscaping": "Landscaping", "landscaper": "Landscaping",
    "general labor": "General Labor", "laborer": "General Labor",
    "construction": "Construction", "warehouse": "Warehouse",
    "forklift": "Forklift Operation", "fork lift": "Forklift Operation",
    "forklift certified": "Forklift Operation",
    "blueprint reading": "Blueprint Reading", "blueprints": "Blueprint Reading",
    # Healthcare
    "cna": "Certified Nursing Assistant", "nursing assistant": "Certified Nursing Assistant",
    "certified nursing assistant": "Certified Nursing Assistant",
    "home health aide": "Home Health Aide", "hha": "Home Health Aide",
    "medical assistant": "Medical Assistant",
    "phlebotomy": "Phlebotomy", "phlebotomist": "Phlebotomy",
    "cpr": "CPR Certified", "cpr certified": "CPR Certified", "bls": "BLS Certified",
    "patient care": "Patient Care",
    "emr": "Electronic Medical Records", "ehr": "Electronic Medical Records",
    "electronic medical records": "Electronic Medical Records",
    "medical records": "Electronic Medical Records",
    "hipaa": "HIPAA Compliance",
    # Retail & customer service
    "retail": "Retail Sales", "retail sales": "Retail Sales",
    "sales": "Sales", "customer service": "Customer Service",
    "customer support": "Customer Service", "call center": "Call Center",
    "receptionist": "Receptionist", "front desk": "Receptionist",
    "clerical": "Clerical", "data entry": "Data Entry",
    "inventory": "Inventory Management", "inventory management": "Inventory Management",
    "stocking": "Stocking", "merchandising": "Merchandising",
    "project management": "Project Management",
    # Transportation
    "delivery driver": "Delivery Driver", "delivery driving": "Delivery Driver",
    "truck driver": "Truck Driver", "trucking": "Truck Driver",
    "cdl": "CDL", "commercial drivers license": "CDL",
    "rideshare": "Rideshare Driver", "courier": "Courier", "logistics": "Logistics",
    # Cleaning & maintenance
    "janitor": "Janitorial", "janitorial": "Janitorial",
    "cleaning": "Cleaning", "maid": "Housekeeping", "handyman": "Handyman",
    # Security
    "security guard": "Security", "security officer": "Security",
    "osha": "OSHA Compliance",
}

SKILL_ALIASES = MappingProxyType(_ALIASES)

# Tokens too short or overloaded to trust without a technical context nearby
AMBIGUOUS_SKILLS: frozenset[str] = frozenset({"r", "c", "go", "ai", "ml", "dl", "ui", "ux"})

# ---------------------------------------------------------------------------
# Stack / role clusters: phrase found anywhere in the text -> implied skills
# ---------------------------------------------------------------------------
STACK_CLUSTERS = MappingProxyType({
    # Tech stacks
    "mern": ("MongoDB", "Express.js", "React", "Node.js"),
    "mern stack": ("MongoDB", "Express.js", "React", "Node.js"),
    "mean": ("MongoDB", "Express.js", "Angular", "Node.js"),
    "mean stack": ("MongoDB", "Express.js", "Angular", "Node.js"),
    "lamp": ("Linux", "MySQL", "PHP"),
    "lamp stack": ("Linux", "MySQL", "PHP"),
    "jamstack": ("JavaScript", "REST"),
    "jam stack": ("JavaScript", "REST"),
    "devops": ("Docker", "Kubernetes", "CI/CD", "Linux"),
    "data science stack": ("Python", "Pandas", "NumPy", "Scikit-learn"),
    "ml stack": ("Python", "Machine Learning", "TensorFlow"),
    "mlops": ("Python", "Docker", "Kubernetes", "Machine Learning"),
    "pern": ("PostgreSQL", "Express.js", "React", "Node.js"),
    "pern stack": ("PostgreSQL", "Express.js", "React", "Node.js"),
    "t3 stack": ("TypeScript", "Next.js", "Tailwind CSS"),
    "serverless stack": ("AWS Lambda", "Serverless", "Node.js"),
    # Healthcare roles
    "registered nurse": ("Patient Care", "Electronic Medical Records", "BLS Certified", "HIPAA Compliance"),
    "rn": ("Patient Care", "Electronic Medical Records", "BLS Certified"),
    "lpn": ("Patient Care", "Electronic Medical Records", "CPR Certified"),
    "certified nursing assistant": ("Patient Care", "CPR Certified", "HIPAA Compliance"),
    "medical assistant": ("Patient Care", "Electronic Medical Records", "Phlebotomy", "HIPAA Compliance"),
    "emt": ("CPR Certified", "BLS Certified", "Patient Care"),
    "paramedic": ("CPR Certified", "BLS Certified", "Patient Care"),
    "phlebotomist": ("Phlebotomy", "Patient Care", "HIPAA Compliance"),
    "home health aide": ("Patient Care", "CPR Certified", "HIPAA Compliance"),
    # Trades & construction
    "master electrician": ("Electrical", "OSHA Compliance", "Blueprint Reading"),
    "journeyman electrician": ("Electrical", "OSHA Compliance"),
    "master plumber": ("Plumbing", "OSHA Compliance", "Blueprint Reading"),
    "hvac technician": ("HVAC", "OSHA Compliance"),
    "hvac tech": ("HVAC", "OSHA Compliance"),
    "general contractor": ("Construction", "Blueprint Reading", "OSHA Compliance", "Project Management"),
    "project superintendent": ("Construction", "Blueprint Reading", "OSHA Compliance", "Project Management"),
    "welder": ("Welding", "OSHA Compliance"),
    "pipe welder": ("Welding", "Plumbing", "OSHA Compliance"),
    "carpenter": ("Carpentry", "Blueprint Reading", "OSHA Compliance"),
    "forklift operator": ("Forklift Operation", "OSHA Compliance", "Warehouse"),
    "warehouse associate": ("Warehouse", "Inventory Management", "Forklift Operation"),
    "cdl driver": ("CDL", "Truck Driver"),
    "cdl class a": ("CDL", "Truck Driver"),
    "cdl class b": ("CDL", "Truck Driver"),
    # Food service & hospitality
    "executive chef": ("Culinary Arts", "Kitchen Staff", "Food Safety", "Inventory Management"),
    "head chef": ("Culinary Arts", "Kitchen Staff", "Food Safety"),
    "sous chef": ("Culinary Arts", "Kitchen Staff", "Food Safety"),
    "line cook": ("Line Cook", "Food Safety", "Food Preparation"),
    "prep cook": ("Prep Cook", "Food Safety", "Food Preparation"),
    "restaurant manager": ("Customer Service", "POS Systems", "Inventory Management", "Food Safety"),
    "food service manager": ("Food Safety", "Inventory Management", "Customer Service"),
    "barista": ("Barista", "Customer Service", "Cash Handling", "POS Systems"),
    "hotel manager": ("Housekeeping", "Customer Service", "Inventory Management"),
    "front desk agent": ("Receptionist", "Customer Service", "Cash Handling"),
    # Retail & customer service
    "store manager": ("Retail Sales", "Inventory Management", "Customer Service", "Cash Handling"),
    "assistant manager": ("Retail Sales", "Inventory Management", "Customer Service"),
    "sales associate": ("Sales", "Customer Service", "Cash Handling", "POS Systems"),
    "cashier": ("Cashier", "Cash Handling", "POS Systems", "Customer Service"),
    "customer service representative": ("Customer Service", "Call Center", "Data Entry"),
    "call center agent": ("Call Center", "Customer Service", "Data Entry"),
    "receptionist": ("Receptionist", "Customer Service", "Data Entry"),
    # Security & safety
    "security guard": ("Security", "Safety Compliance"),
    "security officer": ("Security", "Safety Compliance", "OSHA Compliance"),
    "loss prevention": ("Security", "Safety Compliance", "Retail Sales"),
    # Transportation & logistics
    "delivery driver": ("Delivery Driver", "Customer Service"),
    "logistics coordinator": ("Inventory Management", "Warehouse"),
    "supply chain": ("Inventory Management", "Logistics"),
})

# ---------------------------------------------------------------------------
# Skill graph: child skill -> parent skills implied by it
# ---------------------------------------------------------------------------
CHILD_TO_PARENTS = MappingProxyType({
    "React": ("JavaScript",),
    "Next.js": ("React", "JavaScript"),
    "Vue.js": ("JavaScript",),
    "Angular": ("TypeScript", "JavaScript"),
    "Svelte": ("JavaScript",),
    "Node.js": ("JavaScript",),
    "Express.js": ("Node.js", "JavaScript"),
    "NestJS": ("Node.js", "TypeScript"),
    "TypeScript": ("JavaScript",),
    "React Native": ("React", "JavaScript"),
    "Django": ("Python",),
    "Flask": ("Python",),
    "FastAPI": ("Python",),
    "PyTorch": ("Python", "Machine Learning"),
    "TensorFlow": ("Python", "Machine Learning"),
    "Scikit-learn": ("Python", "Machine Learning"),
    "Pandas": ("Python",),
    "NumPy": ("Python",),
    "Spring Boot": ("Java", "Spring"),
    "Spring": ("Java",),
    "Ruby on Rails": ("Ruby",),
    "Laravel": ("PHP",),
    "Symfony": ("PHP",),
    "SwiftUI": ("Swift", "iOS"),
    "Kubernetes": ("Docker",),
    "Terraform": ("DevOps",),
    "Redux": ("React", "JavaScript"),
    "GraphQL": ("REST",),
    "PostgreSQL": ("SQL",),
    "MySQL": ("SQL",),
    "SQLite": ("SQL",),
    "MongoDB": ("NoSQL",),
    # Non-tech roles: a specialised skill implies the domain baseline
    "Electronic Medical Records": ("HIPAA Compliance",),
    "Phlebotomy": ("Patient Care",),
    "BLS Certified": ("CPR Certified",),
    "HVAC": ("OSHA Compliance",),
    "Electrical": ("OSHA Compliance",),
    "Plumbing": ("OSHA Compliance",),
    "Welding": ("OSHA Compliance",),
    "Carpentry": ("OSHA Compliance",),
    "Construction": ("OSHA Compliance",),
    "Forklift Operation": ("Warehouse", "OSHA Compliance"),
    "CDL": ("Truck Driver",),
    "Culinary Arts": ("Food Safety",),
    "Line Cook": ("Food Safety", "Food Preparation"),
    "Prep Cook": ("Food Safety", "Food Preparation"),
    "Retail Sales": ("Customer Service",),
    "Sales": ("Customer Service",),
    "Call Center": ("Customer Service",),
    "Logistics": ("Inventory Management",),
})

# Parent skill -> child skills it grants partial credit toward when matching
SKILL_PARENTS = MappingProxyType({
    "React": ("Next.js", "Remix", "Gatsby", "React Native"),
    "JavaScript": ("TypeScript", "Node.js", "React", "Vue.js", "Angular", "Next.js"),
    "TypeScript": ("JavaScript",),
    "Python": ("Django", "Flask", "FastAPI", "NumPy", "Pandas", "PyTorch", "TensorFlow", "Scikit-learn"),
    "Node.js": ("Express.js", "NestJS"),
    "SQL": ("PostgreSQL", "MySQL", "SQLite", "SQL Server", "MariaDB"),
    "AWS": ("CloudFormation", "AWS Lambda"),
    "Docker": ("Kubernetes",),
    "Java": ("Spring", "Spring Boot"),
    "Ruby": ("Ruby on Rails",),
    "PHP": ("Laravel", "Symfony"),
})

# Canonical names reported as tools rather than core technical skills
TOOL_SKILLS: frozenset[str] = frozenset({
    "Git", "GitHub", "GitLab", "Bitbucket", "Jira", "Confluence", "Trello",
    "Notion", "Slack", "Figma", "Sketch", "Adobe XD", "Postman", "Insomnia",
    "VS Code", "IntelliJ", "Vim", "Webpack", "Vite", "npm", "Yarn", "pnpm",
    "Storybook", "ESLint", "Prettier", "Datadog", "Grafana", "Prometheus",
    "Linear", "Asana", "Monday.com", "Tableau", "Power BI", "Looker",
    "POS Systems",
    "Electronic Medical Records",
    "Microsoft Office",
    "QuickBooks",
    "Salesforce",
    "Zoom",
    "Google Workspace",
})


def normalize_skill(skill: str) -> str:
    """Return the canonical form of a skill, or the trimmed input if unknown."""
    trimmed = skill.strip()
    if not trimmed:
        return trimmed
    return SKILL_ALIASES.get(trimmed.lower(), trimmed)


def normalize_skills(skills: list[str]) -> list[str]:
    """Normalize a list of skills and drop case-insensitive duplicates."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        normalized = normalize_skill(skill)
        if not normalized:
            continue
        key = normalized.lower()
        if key not in seen:
            seen.add(key)
            result.append(normalized)
    return result


def get_related_skills(skill: str) -> tuple[str, ...]:
    """Child skills that knowing ``skill`` grants partial credit toward."""
    return SKILL_PARENTS.get(normalize_skill(skill), ())
