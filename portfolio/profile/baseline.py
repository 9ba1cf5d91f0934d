"""
Static baseline profile, the last tier of profile resolution.
"""
from typing import Optional

from .models import Certification, Education, Experience, ResolvedProfile

DEFAULT_PROFILE_PHOTO = (
    "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
    "?w=300&h=300&fit=crop&crop=face"
)


def get_baseline_profile(profile_photo_url: Optional[str] = None) -> ResolvedProfile:
    """Build a fresh copy of the baseline profile."""
    return ResolvedProfile(
        first_name="Raju",
        last_name="Bhupatiraju",
        headline=(
            "Enterprise Applications Leader | Digital Transformation Expert "
            "| Technology Strategist"
        ),
        summary=(
            "Seasoned Enterprise Applications Leader with extensive experience in driving "
            "digital transformation initiatives, leading cross-functional teams, and "
            "delivering scalable technology solutions. Passionate about leveraging "
            "cutting-edge technologies to solve complex business challenges and optimize "
            "operational efficiency."
        ),
        location="United States",
        industry="Information Technology & Services",
        profile_picture=profile_photo_url or DEFAULT_PROFILE_PHOTO,
        experience=[
            Experience(
                title="Senior Director, Enterprise Applications",
                company="Fortune 500 Technology Company",
                location="United States",
                start_date="2020-01",
                end_date=None,
                description=(
                    "Leading enterprise-wide application strategy and digital transformation "
                    "initiatives. Managing a team of 50+ engineers and architects across "
                    "multiple product lines. Driving adoption of cloud-native technologies "
                    "and modern development practices."
                ),
                current=True,
            ),
            Experience(
                title="Director, Application Development",
                company="Global Technology Solutions",
                location="United States",
                start_date="2017-03",
                end_date="2019-12",
                description=(
                    "Directed application development lifecycle for mission-critical "
                    "enterprise systems. Implemented DevOps practices and CI/CD pipelines, "
                    "resulting in 40% faster deployment cycles and improved system reliability."
                ),
            ),
            Experience(
                title="Senior Manager, Software Engineering",
                company="Enterprise Software Corp",
                location="United States",
                start_date="2014-06",
                end_date="2017-02",
                description=(
                    "Managed software engineering teams developing scalable web applications "
                    "and microservices. Led migration from monolithic to microservices "
                    "architecture, improving system scalability and maintainability."
                ),
            ),
        ],
        education=[
            Education(
                school="University of Technology",
                degree="Master of Science",
                field="Computer Science",
                start_year="2010",
                end_year="2012",
                description="Specialized in distributed systems and software architecture",
            ),
            Education(
                school="Engineering Institute",
                degree="Bachelor of Technology",
                field="Information Technology",
                start_year="2006",
                end_year="2010",
                description="Foundation in computer science and software engineering principles",
            ),
        ],
        skills=[
            "Enterprise Architecture",
            "Digital Transformation",
            "Cloud Computing",
            "Microservices",
            "DevOps",
            "Agile Methodologies",
            "Team Leadership",
            "Strategic Planning",
            "Software Development",
            "System Integration",
            "Project Management",
            "Technology Strategy",
        ],
        certifications=[
            Certification(
                name="AWS Certified Solutions Architect",
                issuer="Amazon Web Services",
                issue_date="2023-06",
                expiration_date="2026-06",
                credential_id="AWS-SA-2023-001",
            ),
            Certification(
                name="Certified Scrum Master",
                issuer="Scrum Alliance",
                issue_date="2022-03",
                expiration_date="2024-03",
                credential_id="CSM-2022-001",
            ),
        ],
    )
