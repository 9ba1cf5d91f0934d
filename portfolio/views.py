"""
HTML rendering for the site pages.

Pages are small f-string templates; every interpolated value goes through
escape() first.
"""
from html import escape
from typing import Dict, List, Optional

from config.settings import Settings
from portfolio.photos import ResolvedPhoto
from portfolio.profile import ResolvedProfile
from portfolio.projects import Project

BASE_STYLE = """
    body { font-family: Arial, sans-serif; max-width: 960px; margin: 0 auto; padding: 20px;
           color: #1f2937; background: #f8fafc; }
    nav a { margin-right: 16px; color: #1e3a8a; text-decoration: none; font-weight: bold; }
    h1, h2 { color: #1e3a8a; }
    .card { background: white; padding: 20px; border-radius: 8px; margin: 16px 0;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    .muted { color: #6b7280; font-size: 14px; }
    .tag { display: inline-block; background: #e0e7ff; color: #1e3a8a; padding: 2px 8px;
           border-radius: 4px; margin: 2px; font-size: 13px; }
    .gallery { display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 16px; }
    .gallery img { width: 100%; border-radius: 6px; }
    .success { color: #2e7d32; background: #e8f5e8; padding: 15px; border-radius: 5px; }
    .error { color: #d32f2f; background: #ffebee; padding: 15px; border-radius: 5px; }
"""


def page(title: str, body: str, site_name: str = "") -> str:
    """Wrap body content in the shared layout."""
    full_title = f"{title} - {site_name}" if site_name else title
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape(full_title)}</title>
    <style>{BASE_STYLE}</style>
</head>
<body>
    <nav><a href="/">Home</a><a href="/resume">Resume</a><a href="/photography">Photography</a></nav>
    {body}
</body>
</html>"""


def _tags(items: List[str]) -> str:
    return "".join(f'<span class="tag">{escape(i)}</span>' for i in items)


def render_home(settings: Settings, profile: ResolvedProfile, projects: List[Project]) -> str:
    project_cards = "".join(
        f"""<div class="card">
            <h3>{escape(p.name)} <span class="muted">({escape(p.status)})</span></h3>
            <p>{escape(p.description)}</p>
            <div>{_tags(p.technologies)}</div>
            {f'<p><a href="{escape(p.url)}">Visit</a></p>' if p.url else ''}
        </div>"""
        for p in projects
    )
    body = f"""
    <div class="card">
        <img src="{escape(profile.profile_picture or settings.profile_photo_url)}" alt="" width="120">
        <h1>{escape(profile.full_name or settings.site_name)}</h1>
        <p>{escape(profile.headline or settings.site_description)}</p>
        <p><a href="{escape(settings.linkedin_profile)}">LinkedIn</a></p>
    </div>
    <h2 id="projects">Projects</h2>
    {project_cards}
    """
    return page("Home", body, settings.site_name)


def render_resume(settings: Settings, profile: ResolvedProfile, source: Optional[str]) -> str:
    experience = "".join(
        f"""<div class="card">
            <h3>{escape(e.title)}</h3>
            <p><strong>{escape(e.company)}</strong>
               <span class="muted">{escape(e.start_date)} - {"Present" if e.current else escape(e.end_date or "")}</span></p>
            <p>{escape(e.description)}</p>
        </div>"""
        for e in profile.experience
    )
    education = "".join(
        f"""<div class="card">
            <h3>{escape(e.degree)}, {escape(e.field)}</h3>
            <p>{escape(e.school)} <span class="muted">{escape(e.start_year)} - {escape(e.end_year or "")}</span></p>
        </div>"""
        for e in profile.education
    )
    certifications = "".join(
        f"<li>{escape(c.name)} <span class='muted'>{escape(c.issuer)}, {escape(c.issue_date)}</span></li>"
        for c in profile.certifications
    )
    body = f"""
    <div class="card">
        <h1>{escape(profile.full_name)}</h1>
        <p>{escape(profile.headline)}</p>
        <p class="muted">{escape(profile.location)} · {escape(profile.industry)}</p>
        <p>{escape(profile.summary)}</p>
    </div>
    <h2>Experience</h2>{experience}
    <h2>Education</h2>{education}
    <h2>Skills</h2><div class="card">{_tags(profile.skills)}</div>
    <h2>Certifications</h2><div class="card"><ul>{certifications}</ul></div>
    <p class="muted">Source: {escape(source or "unknown")}</p>
    """
    return page("Resume", body, settings.site_name)


def render_photography(
    settings: Settings, photos: List[ResolvedPhoto], like_counts: Dict[str, int]
) -> str:
    cards = "".join(
        f"""<div class="card">
            <img src="{escape(p.base_url)}" alt="{escape(p.title)}" loading="lazy">
            <h3>{escape(p.title)}</h3>
            <p>{escape(p.description)}</p>
            <p class="muted">{escape(" · ".join(v for v in (p.metadata.camera, p.metadata.lens, p.metadata.settings) if v))}</p>
            <div>{_tags(p.metadata.tags or [])}</div>
            <p class="muted">♥ {like_counts.get(p.id, 0)}</p>
        </div>"""
        for p in photos
    )
    body = f"""
    <h1>Bird Photography</h1>
    <div class="gallery">{cards}</div>
    """
    return page("Photography", body, settings.site_name)


def render_oauth_result(provider_name: str, success: bool, message: str) -> str:
    css_class = "success" if success else "error"
    heading = f"{provider_name} Connected" if success else f"{provider_name} Authentication Failed"
    body = f"""
    <h1>{escape(heading)}</h1>
    <div class="{css_class}">{escape(message)}</div>
    <p><a href="/">Return to Homepage</a></p>
    """
    return page(heading, body)


def render_not_found() -> str:
    body = """
    <h1>404 - Page Not Found</h1>
    <p>The page you're looking for doesn't exist.</p>
    <a href="/">Return to Homepage</a>
    """
    return page("Page Not Found", body)
