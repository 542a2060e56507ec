from enum import Enum


class Category(str, Enum):
    MARKETING = "marketing"
    SOFTWARE = "software"
    BUSINESS = "business"
    CONTENT = "content"
    GENERIC = "generic"


# Evaluated top to bottom, first match wins.
CATEGORY_RULES: list[tuple[tuple[str, ...], Category]] = [
    (("marketing", "campaign"), Category.MARKETING),
    (("code", "program", "app", "software"), Category.SOFTWARE),
    (("business", "strategy", "plan"), Category.BUSINESS),
    (("content", "article", "blog", "write"), Category.CONTENT),
]

PREAMBLE = "Create a comprehensive and detailed response for the following:\n\n"
CLOSING = "\nPlease provide a thorough, professional response that addresses all the requirements outlined above."

# header, field label, requirements heading, requirements, deliverables heading, deliverables
TEMPLATES: dict[Category, tuple[str | None, str, str, list[str], str, list[str]]] = {
    Category.MARKETING: (
        "Marketing Campaign Brief:",
        "Objective",
        "Requirements:",
        [
            "Target Audience: Define the primary and secondary audiences",
            "Key Messages: Outline 3-5 core messages to communicate",
            "Channels: Specify digital and traditional marketing channels",
            "Timeline: Provide a phased rollout plan",
            "Budget Considerations: Suggest cost-effective strategies",
            "Success Metrics: Define KPIs and measurement methods",
        ],
        "Deliverables:",
        [
            "Creative concepts with visual descriptions",
            "Sample copy for key materials",
            "Social media strategy and content calendar outline",
            "Competitive analysis insights",
        ],
    ),
    Category.SOFTWARE: (
        "Software Development Specification:",
        "Project",
        "Technical Requirements:",
        [
            "Core Functionality: Detail the primary features and user workflows",
            "Technology Stack: Recommend appropriate frameworks and tools",
            "Architecture: Describe the system design and component structure",
            "Data Model: Define entities, relationships, and storage requirements",
            "Security: Outline authentication, authorization, and data protection",
            "Performance: Specify scalability and optimization needs",
        ],
        "Implementation Plan:",
        [
            "Phase 1: MVP features and core functionality",
            "Phase 2: Enhanced features and integrations",
            "Testing Strategy: Unit, integration, and user acceptance testing",
            "Deployment: CI/CD pipeline and hosting considerations",
        ],
    ),
    Category.BUSINESS: (
        "Business Strategy Document:",
        "Focus Area",
        "Strategic Framework:",
        [
            "Current State Analysis: Assess existing situation and challenges",
            "Objectives: Define clear, measurable goals (SMART framework)",
            "Target Market: Identify and profile key customer segments",
            "Value Proposition: Articulate unique competitive advantages",
            "Action Plan: Break down strategies into actionable initiatives",
            "Resources: Identify required budget, team, and tools",
        ],
        "Execution Roadmap:",
        [
            "Short-term wins (0-3 months)",
            "Medium-term goals (3-12 months)",
            "Long-term vision (1-3 years)",
            "Risk mitigation strategies",
            "Performance monitoring dashboard",
        ],
    ),
    Category.CONTENT: (
        "Content Creation Brief:",
        "Topic",
        "Content Specifications:",
        [
            "Audience: Define reader demographics and expertise level",
            "Tone and Style: Specify voice (formal/casual, technical/accessible)",
            "Structure: Outline sections and flow (intro, body, conclusion)",
            "Length: Target word count and depth of coverage",
            "SEO: Identify primary and secondary keywords",
            "Call-to-Action: Define desired reader response",
        ],
        "Content Elements:",
        [
            "Compelling headline and subheadings",
            "Key points and supporting arguments",
            "Examples, case studies, or data points",
            "Visual suggestions (images, infographics, videos)",
            "Links to relevant resources",
        ],
    ),
    Category.GENERIC: (
        None,
        "Task",
        "Detailed Requirements:",
        [
            "Context and Background: Provide relevant background information",
            "Specific Objectives: Clearly state what needs to be achieved",
            "Key Considerations: Identify important factors to address",
            "Constraints: Note any limitations or boundaries",
            "Success Criteria: Define what a successful outcome looks like",
            "Format and Style: Specify preferred output format",
        ],
        "Expected Output:",
        [
            "Comprehensive and well-structured response",
            "Clear explanations with examples where appropriate",
            "Actionable recommendations or next steps",
            "Professional and engaging presentation",
        ],
    ),
}


def classify(text: str) -> Category:
    """Pick the template category for a user idea by keyword priority."""
    lowered = text.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.GENERIC


def render(category: Category, original_text: str) -> str:
    """
    Builds the structured prompt for a category.
    The original text is inserted verbatim, no escaping or truncation.
    """
    header, label, requirements_heading, requirements, deliverables_heading, deliverables = TEMPLATES[category]

    prompt = PREAMBLE
    if header:
        prompt += f"{header}\n"
    prompt += f"{label}: {original_text}\n\n"
    prompt += f"{requirements_heading}\n"
    for number, line in enumerate(requirements, start=1):
        prompt += f"{number}. {line}\n"
    prompt += "\n"
    prompt += f"{deliverables_heading}\n"
    for line in deliverables:
        prompt += f"- {line}\n"
    prompt += CLOSING
    return prompt


def enhance_prompt(user_idea: str) -> str:
    return render(classify(user_idea), user_idea)
