"""
HTML Generator

Converts a ResumeDocument to localized HTML.

Each section builder resolves its slice of the resume for one language into
plain values and renders a section template. build_html() assembles the
sections and the inlined stylesheet into one self-contained document.
"""

from functools import lru_cache
from typing import Dict, List, Optional, Sequence

from polycv.contexts.templating.bullets import to_list_markup
from polycv.contexts.templating.localization import format_period, get_labels, resolve
from polycv.contexts.templating.logger import log_document_built
from polycv.contexts.templating.registries import TemplateRegistry
from polycv.contexts.templating.resume_data_structure import (
    Certification,
    Education,
    Experience,
    Project,
    ResumeDocument,
    ResumeMeta,
    SkillGroup,
)
from polycv.utils.text_processing import prepend_without_overlap

ITEM_SEPARATOR = " · "
ORG_SEPARATOR = " — "
LINK_SCHEME = "https://"
MAILTO_SCHEME = "mailto:"


class ResumeToHTMLConverter:
    """Renders resume sections and whole documents through a TemplateRegistry."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def build_header(self, meta: ResumeMeta, lang: str, photo_src: Optional[str] = None) -> str:
        """
        Render the header: name, localized title and summary, contacts, photo.

        Contacts with an empty value are left out. LinkedIn and GitHub values
        are stored without scheme; "https://" is added for the link target.
        """
        contacts = []
        if meta.email:
            contacts.append({"href": f"{MAILTO_SCHEME}{meta.email}", "text": meta.email})
        if meta.phone:
            contacts.append({"href": None, "text": meta.phone})
        if meta.location:
            contacts.append({"href": None, "text": meta.location})
        for profile in (meta.linkedin, meta.github):
            if profile:
                contacts.append(
                    {"href": prepend_without_overlap(LINK_SCHEME, profile), "text": profile}
                )

        return self.template_registry.render(
            "sections/header",
            name=meta.name,
            title=resolve(meta.title, lang),
            summary=resolve(meta.summary, lang),
            contacts=contacts,
            photo_src=photo_src,
        )

    def build_skills(
        self, skills: Sequence[SkillGroup], lang: str, labels: Dict[str, str]
    ) -> str:
        groups = [
            {
                "category": resolve(group.category, lang),
                "skills": ITEM_SEPARATOR.join(group.items),
            }
            for group in skills
        ]
        return self.template_registry.render(
            "sections/skills", title=labels["skills"], groups=groups
        )

    def build_experience(
        self, experience: Sequence[Experience], lang: str, labels: Dict[str, str]
    ) -> str:
        entries = [
            {
                "title": resolve(exp.title, lang),
                "org": f"{exp.company}{ORG_SEPARATOR}{exp.location}",
                "period": format_period(exp.start, exp.end, labels["present"]),
                "body": to_list_markup(resolve(exp.description, lang)),
            }
            for exp in experience
        ]
        return self.template_registry.render(
            "sections/experience", title=labels["experience"], entries=entries
        )

    def build_education(
        self, education: Sequence[Education], lang: str, labels: Dict[str, str]
    ) -> str:
        """
        Render education entries.

        The bullet body and the note block only appear when the localized
        text is non-empty.
        """
        entries = []
        for edu in education:
            description = resolve(edu.description, lang)
            entries.append(
                {
                    "title": resolve(edu.degree, lang),
                    "org": f"{edu.institution}{ORG_SEPARATOR}{edu.location}",
                    "period": format_period(edu.start, edu.end, labels["present"]),
                    "body": to_list_markup(description) if description.strip() else "",
                    "note": resolve(edu.note, lang),
                }
            )
        return self.template_registry.render(
            "sections/education", title=labels["education"], entries=entries
        )

    def build_projects(
        self, projects: Sequence[Project], lang: str, labels: Dict[str, str]
    ) -> str:
        entries = [
            {
                "title": project.title,
                "url": project.url,
                "href": prepend_without_overlap(LINK_SCHEME, project.url) if project.url else None,
                "period": format_period(project.start, project.end, labels["present"]),
                "body": resolve(project.description, lang).strip(),
                "tags": ITEM_SEPARATOR.join(project.tags) if project.tags is not None else None,
            }
            for project in projects
        ]
        return self.template_registry.render(
            "sections/projects", title=labels["projects"], entries=entries
        )

    def build_certifications(
        self, certifications: Sequence[Certification], labels: Dict[str, str]
    ) -> str:
        certs = [
            {"name": cert.name, "meta": f"{cert.issuer}{ITEM_SEPARATOR}{cert.date}"}
            for cert in certifications
        ]
        return self.template_registry.render(
            "sections/certifications", title=labels["certifications"], certifications=certs
        )

    def build_html(
        self,
        resume: ResumeDocument,
        lang: str,
        stylesheet: str,
        photo_src: Optional[str] = None,
        include_certifications: bool = False,
    ) -> str:
        """
        Assemble the complete HTML document for one language.

        Args:
            resume: Loaded resume
            lang: Output language code ("fr" or "en")
            stylesheet: CSS text, inlined verbatim into <style>
            photo_src: Optional data URI for the header photo
            include_certifications: Append the certifications section after projects.
                The section is always built; it is left out of the document by default.

        Returns:
            Complete HTML document string

        Raises:
            UnsupportedLanguageError: If lang has no label set
        """
        labels = get_labels(lang)

        sections: List[str] = [
            self.build_header(resume.meta, lang, photo_src),
            self.build_skills(resume.skills, lang, labels),
            self.build_experience(resume.experience, lang, labels),
            self.build_education(resume.education, lang, labels),
            self.build_projects(resume.projects, lang, labels),
        ]
        certifications = self.build_certifications(resume.certifications, labels)
        if include_certifications:
            sections.append(certifications)

        html = self.template_registry.render(
            "structure/document",
            lang=lang,
            name=resume.meta.name,
            stylesheet=stylesheet,
            sections=sections,
        )
        log_document_built(lang, html, include_certifications)
        return html


@lru_cache(maxsize=1)
def _default_converter() -> ResumeToHTMLConverter:
    return ResumeToHTMLConverter()


def build_html(
    resume: ResumeDocument,
    lang: str,
    stylesheet: str,
    photo_src: Optional[str] = None,
    include_certifications: bool = False,
) -> str:
    """Convenience wrapper around ResumeToHTMLConverter.build_html()."""
    return _default_converter().build_html(
        resume,
        lang,
        stylesheet,
        photo_src=photo_src,
        include_certifications=include_certifications,
    )
