from __future__ import annotations
from .profile import Profile, ResumeText
from .schema import ATSAnalysis, Milestone, Resource, RoadmapResult

# Fixed demo pair for "View Sample"; never sent to the model.
SAMPLE_PROFILE = Profile(
    resume=ResumeText(text="Sample Resume"),
    current_role="Marketing Coordinator",
    target_role="UX Designer",
    target_industry="SaaS / Tech",
    top_skills=["Graphic Design", "Social Media Management", "Content Creation", "Empathy"],
    learning_style="Visual",
)

SAMPLE_ROADMAP = RoadmapResult(
    summary=(
        "This roadmap bridges the gap between Marketing and UX Design by leveraging your existing visual skills "
        "and user empathy, while building technical proficiency in prototyping and formal user research methodologies."
    ),
    current_analysis=(
        "Your background in Marketing provides a strong foundation in understanding user personas, brand "
        "consistency, and storytelling, all critical soft skills for UX."
    ),
    gap_analysis=[
        "User Research Methodologies",
        "Wireframing & Prototyping (Figma)",
        "Information Architecture",
        "Usability Testing",
    ],
    estimated_total_time="4-5 Months",
    ats_analysis=ATSAnalysis(
        score=42,
        match_level="Low",
        missing_keywords=["Figma", "User Flows", "Prototyping", "Usability Testing", "Wireframing", "HCI"],
        formatting_issues=[
            "Resume is creative but not ATS-friendly (graphics parsed incorrectly)",
            "Missing standard 'Skills' section header",
        ],
        tips=[
            "Replace the skill bars/graphs with a standard text list.",
            "Add a 'Projects' section highlighting specific UX case studies, even if they are conceptual.",
            "Incorporate standard UX terminology (e.g., 'User-Centered Design') into your experience descriptions.",
        ],
    ),
    timeline=[
        Milestone(
            title="Foundations of UX & Design Thinking",
            duration="Month 1",
            description="Master the core principles of User Experience design, focusing on the 'why' before the 'how'.",
            key_actions=[
                "Complete Google UX Design Certificate Course 1 & 2",
                "Read 'The Design of Everyday Things' by Don Norman",
                "Practice analyzing apps you use daily for usability issues",
            ],
            resources=[
                Resource(title="Google UX Design Certificate", type="Course", provider="Coursera"),
                Resource(title="The Design of Everyday Things", type="Book", provider="Don Norman"),
            ],
        ),
        Milestone(
            title="Technical Tooling (Figma)",
            duration="Month 2-3",
            description="Get hands-on with industry standard tools to translate concepts into visuals.",
            key_actions=[
                "Recreate 3 popular app interfaces in Figma (Pixel perfect copy)",
                "Learn auto-layout, components, and prototyping features",
                "Participate in daily UI challenges",
            ],
            resources=[
                Resource(title="Figma 101 Crash Course", type="Course", provider="YouTube"),
                Resource(title="Refactoring UI", type="Book", provider="Adam Wathan"),
            ],
        ),
        Milestone(
            title="Portfolio & Case Studies",
            duration="Month 4-5",
            description="Apply your skills to create 2-3 comprehensive case studies that solve real problems.",
            key_actions=[
                "Conduct a personal project from research to high-fidelity prototype",
                "Document your process: Problem, Research, Solution, Testing",
                "Build a portfolio website using a simple builder",
            ],
            resources=[
                Resource(title="Portfolio Inspiration", type="Article", provider="Bestfolios"),
                Resource(title="Webflow for Designers", type="Tool", provider="Webflow"),
            ],
        ),
    ],
)
