"""
Static application projects showcased on the home page.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Project:
    """A showcased application."""
    id: str
    name: str
    description: str
    status: str  # "live" | "development" | "coming-soon"
    technologies: List[str] = field(default_factory=list)
    screenshots: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    url: Optional[str] = None
    github_url: Optional[str] = None
    launch_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "githubUrl": self.github_url,
            "technologies": self.technologies,
            "status": self.status,
            "screenshots": self.screenshots,
            "features": self.features,
            "launchDate": self.launch_date,
        }


def get_projects() -> List[Project]:
    return [
        Project(
            id="remindme",
            name="RemindMe",
            description=(
                "A comprehensive personal reminder assistant for life's important moments. "
                "Track birthdays, anniversaries, and special milestones with intelligent "
                "notifications and contact management."
            ),
            url="https://remindme-workers.rama-bhupatiraju.workers.dev",
            github_url="https://github.com/rajubhupatiraju/remindme",
            technologies=[
                "TypeScript", "Cloudflare Workers", "Cloudflare D1", "Hono Framework",
                "JWT Authentication", "Bootstrap 5", "RESTful APIs",
            ],
            status="live",
            screenshots=[
                "/assets/images/projects/remindme/dashboard.jpg",
                "/assets/images/projects/remindme/contacts.jpg",
                "/assets/images/projects/remindme/milestones.jpg",
            ],
            features=[
                "User authentication and secure login",
                "Contact management with detailed profiles",
                "Milestone tracking (birthdays, anniversaries, etc.)",
                "Smart reminder notifications",
                "Responsive design for all devices",
                "Search and filter functionality",
                "Dashboard with upcoming events",
                "RESTful API architecture",
            ],
            launch_date="2024-12",
        ),
        Project(
            id="portfolio-website",
            name="Professional Portfolio",
            description=(
                "This very website! A modern, responsive portfolio showcasing professional "
                "experience, bird photography, and application projects."
            ),
            url="https://raju-bhupatiraju-portfolio.workers.dev",
            github_url="https://github.com/rajubhupatiraju/portfolio",
            technologies=[
                "Python", "FastAPI", "LinkedIn API Integration", "Google Photos API",
                "Responsive Design", "Modern CSS",
            ],
            status="live",
            screenshots=[
                "/assets/images/projects/portfolio/homepage.jpg",
                "/assets/images/projects/portfolio/resume.jpg",
                "/assets/images/projects/portfolio/photography.jpg",
            ],
            features=[
                "Dynamic LinkedIn profile integration",
                "Automated bird photography gallery",
                "Professional resume display",
                "Project showcase with live demos",
            ],
            launch_date="2024-12",
        ),
        Project(
            id="enterprise-dashboard",
            name="Enterprise Analytics Dashboard",
            description=(
                "A comprehensive business intelligence platform for enterprise-level data "
                "visualization and analytics."
            ),
            technologies=[
                "React", "TypeScript", "D3.js", "Node.js", "PostgreSQL", "Redis",
                "Docker", "Kubernetes",
            ],
            status="coming-soon",
            screenshots=["/assets/images/projects/enterprise/preview.jpg"],
            features=[
                "Real-time data visualization",
                "Customizable dashboard widgets",
                "Advanced filtering and drill-down",
                "Role-based access control",
            ],
            launch_date="2025-Q1",
        ),
        Project(
            id="ai-photo-organizer",
            name="AI Photo Organizer",
            description=(
                "An intelligent photo management system that uses machine learning to "
                "automatically categorize, tag, and organize your photo collection."
            ),
            technologies=[
                "Python", "TensorFlow", "OpenCV", "FastAPI", "PostgreSQL", "Redis",
                "Docker", "AWS S3",
            ],
            status="development",
            screenshots=["/assets/images/projects/ai-organizer/concept.jpg"],
            features=[
                "AI-powered photo categorization",
                "Automatic tagging and metadata extraction",
                "Duplicate photo detection",
                "Smart album creation",
            ],
            launch_date="2025-Q2",
        ),
    ]
