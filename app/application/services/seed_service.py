"""Sample portfolio data for demos and local development."""

from __future__ import annotations

import logging

from app.application.dtos.portfolio_user import PortfolioUserCreate
from app.application.dtos.project import ProjectCreate
from app.application.dtos.skill import SkillCreate
from app.application.interfaces.repositories import IPortfolioUserRepository
from app.application.interfaces.services import ICacheInvalidator
from app.domain.exceptions import ValidationException
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)

# (name, bio, [(project title, description)], [(skill name, level)])
SAMPLE_PORTFOLIOS: list[tuple[str, str, list[tuple[str, str]], list[tuple[str, str]]]] = [
    (
        "Jordan Developer",
        "Full-stack developer passionate about learning new tech.",
        [
            ("Task Tracker", "Manage tasks effectively with a modern UI"),
            ("Weather App", "Forecast weather using external APIs"),
            ("E-commerce Platform", "Online shopping platform with payment integration"),
        ],
        [
            ("C#", "Advanced"),
            ("Blazor", "Intermediate"),
            ("ASP.NET Core", "Advanced"),
            ("Entity Framework", "Intermediate"),
        ],
    ),
    (
        "Sarah Chen",
        "Frontend developer specializing in React and modern JavaScript frameworks.",
        [
            ("Portfolio Website", "Responsive portfolio site with animations and modern design"),
            ("Social Media Dashboard", "Real-time analytics dashboard for social media metrics"),
            ("Blog Platform", "Content management system with rich text editor"),
            ("Landing Page Builder", "Drag-and-drop tool for creating landing pages"),
        ],
        [
            ("React", "Advanced"),
            ("TypeScript", "Advanced"),
            ("CSS/SASS", "Advanced"),
            ("JavaScript", "Advanced"),
            ("Tailwind CSS", "Intermediate"),
        ],
    ),
    (
        "Marcus Johnson",
        "Backend engineer focused on scalable APIs and microservices architecture.",
        [
            ("RESTful API Gateway", "High-performance API gateway with rate limiting and caching"),
            ("Inventory Management System", "Real-time inventory tracking for warehouse operations"),
            ("Payment Processing Service", "Secure payment integration with multiple providers"),
            ("Authentication Service", "OAuth2 and JWT-based authentication microservice"),
            ("Email Notification System", "Scalable email service with templating and scheduling"),
        ],
        [
            ("Node.js", "Advanced"),
            ("Python", "Advanced"),
            ("PostgreSQL", "Advanced"),
            ("Redis", "Intermediate"),
            ("Docker", "Advanced"),
            ("MongoDB", "Intermediate"),
        ],
    ),
    (
        "Elena Rodriguez",
        "DevOps engineer passionate about automation and cloud infrastructure.",
        [
            ("CI/CD Pipeline", "Automated deployment pipeline with testing and monitoring"),
            ("Infrastructure as Code", "Terraform scripts for multi-cloud deployment"),
            ("Monitoring Dashboard", "Real-time system monitoring with Grafana and Prometheus"),
        ],
        [
            ("AWS", "Advanced"),
            ("Kubernetes", "Advanced"),
            ("Terraform", "Intermediate"),
            ("Jenkins", "Intermediate"),
        ],
    ),
    (
        "Raj Patel",
        "Mobile developer creating beautiful cross-platform applications.",
        [
            ("Fitness Tracker App", "Track workouts, calories, and fitness goals"),
            ("Restaurant Finder", "Discover local restaurants with reviews and reservations"),
            ("Budget Manager", "Personal finance app with expense tracking"),
            ("Language Learning App", "Interactive lessons for learning new languages"),
        ],
        [
            ("Flutter", "Advanced"),
            ("Dart", "Advanced"),
            ("React Native", "Intermediate"),
            ("Swift", "Intermediate"),
            ("Firebase", "Advanced"),
        ],
    ),
    (
        "Kenji Tanaka",
        "Data scientist leveraging machine learning to solve complex problems.",
        [
            ("Predictive Analytics Dashboard", "ML-powered sales forecasting and trend analysis"),
            ("Image Classification Model", "CNN-based image recognition for medical diagnostics"),
            ("Recommendation Engine", "Collaborative filtering for personalized product recommendations"),
        ],
        [
            ("Python", "Advanced"),
            ("TensorFlow", "Advanced"),
            ("Pandas", "Advanced"),
            ("SQL", "Advanced"),
            ("R", "Intermediate"),
            ("Scikit-learn", "Advanced"),
        ],
    ),
    (
        "Olivia Brown",
        "UX/UI designer with front-end development skills, creating delightful user experiences.",
        [
            ("Banking App Redesign", "Modern interface for mobile banking application"),
            ("Design System", "Comprehensive component library and style guide"),
            ("E-learning Platform UI", "Intuitive interface for online course platform"),
            ("Dashboard Prototype", "Interactive prototype for analytics dashboard"),
        ],
        [
            ("Figma", "Advanced"),
            ("HTML/CSS", "Advanced"),
            ("Adobe XD", "Intermediate"),
            ("JavaScript", "Intermediate"),
        ],
    ),
    (
        "Ahmed Hassan",
        "Cybersecurity specialist focused on application security and penetration testing.",
        [
            ("Security Audit Tool", "Automated vulnerability scanning for web applications"),
            ("Encryption Library", "Open-source cryptography library for secure data handling"),
            ("Intrusion Detection System", "Real-time network monitoring and threat detection"),
            ("Secure API Gateway", "API security with OAuth2, rate limiting, and encryption"),
            ("Password Manager", "Secure password vault with multi-factor authentication"),
        ],
        [
            ("Penetration Testing", "Advanced"),
            ("Python", "Advanced"),
            ("Network Security", "Advanced"),
            ("Cryptography", "Advanced"),
        ],
    ),
    (
        "Nina Petrov",
        "Cloud architect designing scalable and resilient cloud solutions.",
        [
            ("Multi-Region Deployment", "Global application deployment with auto-failover"),
            ("Serverless Architecture", "Cost-effective serverless solution using AWS Lambda"),
            ("Cloud Migration Strategy", "Enterprise migration from on-premise to cloud"),
        ],
        [
            ("AWS", "Advanced"),
            ("Azure", "Advanced"),
            ("Microservices", "Advanced"),
            ("Serverless", "Advanced"),
            ("Cloud Security", "Intermediate"),
        ],
    ),
    (
        "Carlos Santos",
        "Game developer creating immersive gaming experiences for multiple platforms.",
        [
            ("Action RPG", "3D role-playing game with combat and exploration"),
            ("Puzzle Mobile Game", "Addictive puzzle game with 100+ levels"),
            ("Multiplayer Arena", "Online multiplayer battle arena with matchmaking"),
            ("VR Experience", "Virtual reality adventure game for VR headsets"),
        ],
        [
            ("Unity", "Advanced"),
            ("C#", "Advanced"),
            ("Unreal Engine", "Intermediate"),
            ("3D Modeling", "Intermediate"),
            ("Game Design", "Advanced"),
        ],
    ),
]


class SeedService:
    """Inserts SAMPLE_PORTFOLIOS into an empty database."""

    def __init__(
        self,
        portfolio_users: IPortfolioUserRepository,
        invalidator: ICacheInvalidator,
    ) -> None:
        self.portfolio_users = portfolio_users
        self.invalidator = invalidator

    @traced("seed.sample_data")
    async def seed(self) -> int:
        """Insert the sample portfolios and clear every aggregate cache.

        Returns:
            Number of portfolio users inserted.

        Raises:
            ValidationException: If any portfolio user already exists.
        """
        if await self.portfolio_users.has_any():
            raise ValidationException("Sample data already exists.")
        for name, bio, projects, skills in SAMPLE_PORTFOLIOS:
            # portfolio_user_id is assigned through the relationship on insert
            await self.portfolio_users.add_portfolio(
                PortfolioUserCreate(name=name, bio=bio),
                [ProjectCreate(title=t, description=d, portfolio_user_id=0) for t, d in projects],
                [SkillCreate(name=n, level=lv, portfolio_user_id=0) for n, lv in skills],
            )
        await self.portfolio_users.commit()
        await self.invalidator.invalidate_all()
        logger.info("Inserted %d sample portfolio users", len(SAMPLE_PORTFOLIOS))
        return len(SAMPLE_PORTFOLIOS)
