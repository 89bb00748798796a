"""Idempotent seed data for solutions and goals.

Goal progress and contribution percentages below are stale snapshots;
startup recalculates them from the metrics.
"""

from impactmap.db.repository import InMemoryRepository
from impactmap.schemas.goals import ImpactGoal
from impactmap.schemas.solutions import SolutionSchema

SEED_SOLUTIONS = [
    {
        "id": "1",
        "name": "ML Training Platform",
        "description": "End-to-end machine learning model training and validation platform",
        "status": "active",
        "category": "platform",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-03-15T00:00:00Z",
        "ownerName": "Dr. Maria Rodriguez",
    },
    {
        "id": "6",
        "name": "AI Diagnostic Assistant",
        "description": "AI-powered diagnostic support for healthcare providers",
        "status": "active",
        "category": "platform",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-03-15T00:00:00Z",
        "ownerName": "Dr. Sarah Chen",
    },
    {
        "id": "2",
        "name": "Impact Analytics Platform",
        "description": "Enterprise solution for measuring and tracking social impact metrics",
        "status": "active",
        "category": "platform",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-03-15T00:00:00Z",
        "ownerName": "James Wilson",
    },
    {
        "id": "3",
        "name": "Community Engagement Portal",
        "description": "Stakeholder engagement and community feedback platform",
        "status": "active",
        "category": "product",
        "createdAt": "2024-02-01T00:00:00Z",
        "updatedAt": "2024-03-15T00:00:00Z",
        "ownerName": "Lisa Wong",
    },
]

SEED_GOALS = [
    {
        "id": "1",
        "title": "Improve Model Performance",
        "description": "Achieve 98% accuracy while reducing training time by 25%",
        "deadline": "2024-12-31",
        "status": "live",
        "teamMembers": ["Dr. Maria Rodriguez", "Alex Chen"],
        "lastUpdated": "2024-03-15T00:00:00Z",
        "weight": 1.0,
        "progress": 0.65,
        "contractId": "contract-1",
        "solutions": [
            {
                "solutionId": "1",
                "contributionWeight": 1.0,
                "contributionPercentage": 0.65,
                "metrics": {
                    "accuracy": {
                        "current": 96.5,
                        "target": 98.0,
                        "direction": "increase",
                        "unit": "percent",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                    "trainingTime": {
                        "current": 120,
                        "target": 90,
                        "direction": "decrease",
                        "unit": "minutes",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                },
            },
        ],
    },
    {
        "id": "5",
        "title": "Increase Market Share",
        "description": "Achieve 25% market share in the enterprise segment by Q4 2024",
        "deadline": "2024-12-31",
        "status": "draft",
        "teamMembers": ["James Wilson", "Emma Davis"],
        "lastUpdated": "2024-03-15T00:00:00Z",
        "weight": 1.0,
        "progress": 0.45,
        "solutions": [
            {
                "solutionId": "2",
                "contributionWeight": 0.7,
                "contributionPercentage": 0.45,
                "metrics": {
                    "marketShare": {
                        "current": 15,
                        "target": 25,
                        "direction": "increase",
                        "unit": "percent",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                },
            },
        ],
    },
    {
        "id": "4",
        "title": "Improve User Retention",
        "description": "Increase monthly active users retention rate to 85%",
        "deadline": "2024-09-30",
        "status": "live",
        "teamMembers": ["Alex Kim", "Lisa Wong"],
        "lastUpdated": "2024-03-14T00:00:00Z",
        "weight": 1.0,
        "progress": 0.75,
        "contractId": "contract-2",
        "solutions": [
            {
                "solutionId": "3",
                "contributionWeight": 1.0,
                "contributionPercentage": 0.75,
                "metrics": {
                    "retentionRate": {
                        "current": 78,
                        "target": 85,
                        "direction": "increase",
                        "unit": "percent",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                },
            },
        ],
    },
    {
        "id": "7",
        "title": "Improve Diagnostic Accuracy",
        "description": "Achieve 99% accuracy in AI-assisted diagnoses by Q4 2024",
        "deadline": "2024-12-31",
        "status": "draft",
        "teamMembers": ["Dr. Sarah Chen", "Dr. Lisa Wong"],
        "lastUpdated": "2024-03-15T00:00:00Z",
        "weight": 1.0,
        "progress": 0.85,
        "solutions": [
            {
                "solutionId": "1",
                "contributionWeight": 0.8,
                "contributionPercentage": 0.85,
                "metrics": {
                    "diagnosticAccuracy": {
                        "current": 97,
                        "target": 99,
                        "direction": "increase",
                        "unit": "percent",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                },
            },
            {
                "solutionId": "6",
                "contributionWeight": 0.2,
                "contributionPercentage": 0.85,
                "metrics": {
                    "diagnosticAccuracy": {
                        "current": 97,
                        "target": 99,
                        "direction": "increase",
                        "unit": "percent",
                        "updatedAt": "2024-03-15T00:00:00Z",
                    },
                },
            },
        ],
    },
]


def seed_repository(repository: InMemoryRepository) -> None:
    """Load seed solutions and goals. Existing entries with the same id are replaced."""
    repository.load(
        goals=[ImpactGoal.model_validate(goal) for goal in SEED_GOALS],
        solutions=[SolutionSchema.model_validate(solution) for solution in SEED_SOLUTIONS],
    )
