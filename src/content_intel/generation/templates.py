"""
Static tables for the builtin generator.

Read-only after import. Nothing here does I/O or holds per-request state.
"""

import re

DEFAULT_CATEGORY = "general"

# =============================================================================
# PARAGRAPH TEMPLATES
# =============================================================================

CATEGORY_TEMPLATES: dict[str, dict[str, list[str]]] = {
    "technology": {
        "intro": [
            "In today's rapidly evolving digital landscape, {topic} has become increasingly important for students and professionals alike.",
            "The field of {topic} continues to transform how we approach learning and problem-solving in the modern era.",
            "Understanding {topic} is essential for anyone looking to stay competitive in the technology-driven world.",
        ],
        "body": [
            "When examining {topic}, it's crucial to consider both the theoretical foundations and practical applications that make this subject so relevant.",
            "The key aspects of {topic} include understanding core concepts, exploring real-world implementations, and staying updated with the latest developments.",
            "Students studying {topic} should focus on hands-on experience, as practical knowledge often complements theoretical understanding.",
        ],
        "conclusion": [
            "As we continue to advance in this field, {topic} will undoubtedly play a pivotal role in shaping future innovations and career opportunities.",
            "By mastering {topic}, students position themselves at the forefront of technological advancement and professional growth.",
            "The journey of learning {topic} is ongoing, and staying curious and adaptable will be key to long-term success.",
        ],
    },
    "education": {
        "intro": [
            "Education plays a fundamental role in shaping our understanding of {topic} and its impact on society.",
            "The study of {topic} offers valuable insights that extend beyond the classroom into real-world applications.",
            "As educators and learners, exploring {topic} helps us develop critical thinking skills essential for academic success.",
        ],
        "body": [
            "Effective learning about {topic} requires a combination of theoretical knowledge and practical engagement with the subject matter.",
            "Research in {topic} has shown that active participation and collaborative learning significantly enhance understanding and retention.",
            "The educational approach to {topic} should balance traditional methods with innovative teaching strategies.",
        ],
        "conclusion": [
            "Continued exploration of {topic} will contribute to both personal growth and the advancement of educational practices.",
            "By embracing lifelong learning in {topic}, we prepare ourselves for the challenges and opportunities that lie ahead.",
            "The knowledge gained from studying {topic} serves as a foundation for future academic and professional endeavors.",
        ],
    },
    "science": {
        "intro": [
            "Scientific inquiry into {topic} reveals fascinating insights about the natural world and our place within it.",
            "The study of {topic} combines rigorous methodology with creative thinking to advance our understanding.",
            "Exploring {topic} through a scientific lens helps us develop evidence-based perspectives on complex issues.",
        ],
        "body": [
            "Research methodologies in {topic} have evolved significantly, incorporating new technologies and interdisciplinary approaches.",
            "Key findings in {topic} demonstrate the importance of systematic observation and hypothesis testing.",
            "The scientific community continues to make breakthroughs in {topic}, opening new avenues for exploration and discovery.",
        ],
        "conclusion": [
            "Future research in {topic} promises to unlock even more discoveries that could transform our understanding.",
            "The scientific study of {topic} reminds us of the importance of curiosity and intellectual rigor.",
            "As we advance our knowledge of {topic}, we contribute to the collective scientific understanding of humanity.",
        ],
    },
    "business": {
        "intro": [
            "In the competitive business environment, understanding {topic} is crucial for organizational success and growth.",
            "The business implications of {topic} extend across industries, affecting strategy, operations, and innovation.",
            "Professionals seeking to excel must develop a comprehensive understanding of {topic} and its applications.",
        ],
        "body": [
            "Successful implementation of {topic} requires careful planning, resource allocation, and stakeholder engagement.",
            "Case studies in {topic} reveal best practices and common pitfalls that organizations should consider.",
            "The strategic importance of {topic} cannot be overstated in today's dynamic business landscape.",
        ],
        "conclusion": [
            "Organizations that master {topic} position themselves for sustainable competitive advantage.",
            "The future of business will increasingly depend on effective application of {topic} principles.",
            "By investing in {topic} knowledge, professionals enhance their value and career prospects.",
        ],
    },
    "general": {
        "intro": [
            "The topic of {topic} offers rich opportunities for exploration and understanding across multiple dimensions.",
            "Examining {topic} provides valuable perspectives that can enhance both academic knowledge and practical skills.",
            "A comprehensive look at {topic} reveals its significance in contemporary discourse and everyday life.",
        ],
        "body": [
            "When delving into {topic}, it's important to consider various viewpoints and the evidence supporting different positions.",
            "The multifaceted nature of {topic} requires an interdisciplinary approach to fully appreciate its complexity.",
            "Understanding {topic} involves examining historical context, current developments, and future implications.",
        ],
        "conclusion": [
            "Continued engagement with {topic} will deepen understanding and open new avenues for inquiry.",
            "The insights gained from exploring {topic} contribute to personal growth and informed decision-making.",
            "As we reflect on {topic}, we recognize its ongoing relevance and the importance of staying informed.",
        ],
    },
}

# (id, slot, type) for each generated paragraph, in output order
PARAGRAPH_SLOTS = [
    ("p1", "intro", "introduction"),
    ("p2", "body", "body"),
    ("p3", "conclusion", "conclusion"),
]

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "shall", "can", "need", "dare", "ought", "used",
    "how", "what", "why", "when", "where", "who", "which", "this", "that",
    "these", "those", "i", "you", "he", "she", "it", "we", "they", "my",
    "your", "his", "her", "its", "our", "their",
})

# =============================================================================
# KEYWORDS
# =============================================================================

GENERIC_KEYWORDS = ["university", "education", "learning", "academic", "research"]
MAX_KEYWORDS = 8
MAX_TAGS = 3
SEO_TITLE_MAX = 60

META_DESCRIPTION_TEMPLATE = (
    "Explore {topic} in this comprehensive article covering key concepts "
    "and insights for students and professionals."
)

# =============================================================================
# GRAMMAR / IMPROVE
# =============================================================================

COMMON_TYPOS: dict[str, str] = {
    "recieve": "receive",
    "teh": "the",
    "goverment": "government",
    "occurance": "occurrence",
    "definately": "definitely",
    "seperate": "separate",
    "untill": "until",
    "wich": "which",
    "becuase": "because",
    "accross": "across",
    "beleive": "believe",
    "occured": "occurred",
    "thier": "their",
}

PHRASE_SUBSTITUTIONS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\bvery good\b", re.IGNORECASE), "excellent"),
    (re.compile(r"\bvery bad\b", re.IGNORECASE), "terrible"),
    (re.compile(r"\bvery important\b", re.IGNORECASE), "crucial"),
    (re.compile(r"\bin order to\b", re.IGNORECASE), "to"),
    (re.compile(r"\bhappy\b", re.IGNORECASE), "delighted"),
]

# =============================================================================
# TOPIC IDEAS
# =============================================================================

TOPIC_IDEAS: dict[str, list[str]] = {
    "technology": [
        "Future of AI in Education",
        "Cybersecurity Best Practices for Students",
        "Impact of 5G on Campus Connectivity",
    ],
    "education": [
        "Modern Study Techniques",
        "Benefits of Collaborative Learning",
        "Managing Academic Stress",
    ],
    "science": [
        "How Peer Review Shapes Scientific Progress",
        "Citizen Science Projects Students Can Join",
        "Climate Research on a Student Budget",
    ],
    "business": [
        "Entrepreneurship for Students",
        "Digital Marketing Trends",
        "Financial Literacy for Beginners",
    ],
    "general": [
        "How to stay productive",
        "Benefits of daily reading",
        "Importance of community involvement",
    ],
}

# =============================================================================
# SPAM / EXCERPT / SUGGESTIONS
# =============================================================================

URL_PATTERN = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
PROMOTIONAL_PATTERN = re.compile(r"buy now|click here|free money|act now", re.IGNORECASE)
REPEATED_CHAR_PATTERN = re.compile(r"(.)\1{9,}", re.DOTALL)
MAX_LINKS = 5

TAG_PATTERN = re.compile(r"<[^<>]*>")
# The second branch takes an unterminated tail in one match.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+|[^.!?]+$")
SENTENCE_ENDINGS = ".!?"
ELLIPSIS = "..."

# =============================================================================
# CHAT INTENTS
# =============================================================================

IntentRule = tuple[tuple[re.Pattern, ...], ...]


def _rule(*alternatives: str | tuple[str, ...]) -> IntentRule:
    """Compile an intent rule. It matches when every pattern of any one
    alternative is found in the message."""
    return tuple(
        tuple(re.compile(p) for p in ((alt,) if isinstance(alt, str) else alt))
        for alt in alternatives
    )


# Checked top to bottom; the first rule that matches the lowercased
# message wins.
CHAT_INTENTS: list[tuple[str, IntentRule, str]] = [
    (
        "registration",
        _rule(("register|sign up|join|account", r"how|\?|do i")),
        "To register on the blog platform:\n\n"
        "1. Click 'Register' on the homepage\n"
        "2. Fill in your details (name, email, university ID)\n"
        "3. Choose your role (Student, Faculty, or Alumni)\n"
        "4. Accept the terms and conditions\n"
        "5. Submit the form\n\n"
        "You'll receive a verification email. Click the link to verify your account.\n\n"
        "After verification, students and faculty wait for admin approval "
        "(usually 24-48 hours); alumni submit verification documents first.\n\n"
        "Once approved, you can start blogging! Need help with a specific step?",
    ),
    (
        "email_verification",
        _rule("verif", ("email", "confirm|activate")),
        "Email verification steps:\n\n"
        "1. Check your inbox for an email from the blog team\n"
        "2. Click the verification link in the email\n"
        "3. You'll be redirected to a confirmation page\n\n"
        "Didn't receive the email? Check your spam folder, wait a few minutes, "
        "or click 'Resend Verification Email' on the login page.\n\n"
        "After verification, wait for admin approval before you start posting.",
    ),
    (
        "approval",
        _rule("approval|pending", ("waiting", "account")),
        "Account approval process:\n\n"
        "After email verification your account goes to admin review. "
        "Students and faculty are usually approved within 24-48 hours; "
        "alumni may take longer because of document checks.\n\n"
        "You'll get an email when you're approved. Then you can publish posts, "
        "comment, and collaborate with other authors.\n\n"
        "Still waiting after 3 days? Contact support.",
    ),
    (
        "login_trouble",
        _rule(("login|log in|sign in", "can't|cannot|problem|issue")),
        "Login troubleshooting:\n\n"
        "1. Wrong password: use 'Forgot Password' to reset it\n"
        "2. Email not verified: check your inbox and verify\n"
        "3. Account pending: wait for admin approval\n"
        "4. Account suspended: contact an admin\n\n"
        "Also check that you're using the right email and that caps lock is off. "
        "Still stuck? Tell me the exact error message.",
    ),
    (
        "roles",
        _rule("role|permission", ("author", "what")),
        "Platform roles:\n\n"
        "Author (student or faculty): create and edit posts, request peer reviews, "
        "collaborate with co-authors, comment.\n"
        "Moderator: review and approve posts, give feedback to authors.\n"
        "Admin: user management and platform settings.\n\n"
        "Your role is assigned during registration.",
    ),
    (
        "greeting",
        _rule(r"^(hi|hello|hey|greetings|good morning|good afternoon|good evening|howdy|hiya)\b"),
        "Hello! I'm the blog assistant. I can help you find your way around the "
        "platform, answer questions about blogging, and help with your writing. "
        "How can I help you today?",
    ),
    (
        "platform_info",
        _rule(("university|platform", "what is|tell me about|about")),
        "The university blogging platform is a shared space for students, faculty "
        "and alumni to publish research, knowledge and experiences. It offers "
        "AI-assisted writing tools, real-time collaboration and peer review.",
    ),
    (
        "create_post",
        _rule(("create|write|post|publish", r"how|where|\?")),
        "To create a new blog post:\n"
        "1. Click 'Create Post' in your dashboard\n"
        "2. Write your content in the editor\n"
        "3. Use the AI tools for grammar checks and improvements\n"
        "4. Add categories and tags\n"
        "5. Submit for review or publish directly (depending on your role)\n\n"
        "Would you like help with any part of the writing process?",
    ),
    (
        "ai_tools",
        _rule(r"\bai\b|grammar|improve|suggestions"),
        "The editor's AI panel offers:\n"
        "- Grammar and spelling check\n"
        "- Content improvement suggestions\n"
        "- Topic ideas\n"
        "- Keyword suggestions\n"
        "- Content analysis\n\n"
        "Open it while creating or editing a post.",
    ),
    (
        "collaboration",
        _rule(r"collaborate|co-author|work together"),
        "You can invite co-authors to your posts, see who's editing in real time, "
        "and request peer reviews from other authors.",
    ),
    (
        "help",
        _rule(r"help|support|how do i|how can i"),
        "I can help with:\n"
        "- Creating and editing blog posts\n"
        "- Using the AI writing tools\n"
        "- Collaboration and peer review\n"
        "- The publishing and moderation process\n\n"
        "What would you like to know more about?",
    ),
    (
        "categories",
        _rule(r"categor|topic"),
        "Posts are organised into categories such as Technology, Education, "
        "Science and Business. Pick one when you create a post so readers can "
        "find it.",
    ),
    (
        "review",
        _rule(r"review|approve|moderat"),
        "The review process: authors submit posts, moderators review them and "
        "give feedback, and posts are approved, rejected or sent back for "
        "revision. Peer reviewers can add structured feedback too.",
    ),
    (
        "dashboard",
        _rule(r"dashboard|navigate|find"),
        "Your dashboard shows your posts and their status, your analytics and "
        "notifications, and lets you create new content or manage your profile.",
    ),
    (
        "thanks",
        _rule(r"thank"),
        "You're welcome! Ask me anything about the platform or your writing. Happy writing!",
    ),
    (
        "goodbye",
        _rule(r"bye|see you"),
        "Goodbye! Reach out anytime you need help. Happy blogging!",
    ),
]

DEFAULT_CHAT_REPLIES = [
    "I'm here to help you with the blog platform! Ask me about creating posts, "
    "the AI tools, collaboration, or anything else about blogging here.",
    "I can help with writing, editing, publishing and finding your way around "
    "the platform. What would you like to know?",
    "Feel free to ask about platform features, writing tips, or how to get "
    "started with your first post!",
]
