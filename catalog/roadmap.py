"""
Ten-week implementation roadmap: project metrics, phases, tasks and the
product feature areas tracked on the implementation tab.
"""

from typing import Any, Dict, List

PROJECT_METRICS: Dict[str, Any] = {
    'total_weeks': 10,
    'total_hours': 472,
    'team_size': '8-12',
    'budget_range': '$75K-$125K',
    'start_date': 'November 25, 2025',
    'end_date': 'February 3, 2026',
    'internal_roi': '20-35% productivity gains',
    'external_revenue': '$125K-$4M Year 1',
}

TASK_STATUSES = ['Not Started', 'In Progress', 'Complete', 'Blocked']

CATEGORY_COLORS: Dict[str, str] = {
    'Research': 'hsl(185, 77%, 46%)',
    'Development': 'hsl(146, 50%, 36%)',
    'Analysis': 'hsl(295, 35%, 41%)',
    'Testing': 'hsl(48, 57%, 56%)',
    'Enablement': 'hsl(189, 25%, 46%)',
    'Launch': 'hsl(0, 67%, 56%)',
}

ROADMAP_PHASES: List[Dict[str, Any]] = [
    {
        'id': 'phase-1',
        'name': '1. Research & Data Integration',
        'short_name': 'Research',
        'start_week': 1,
        'end_week': 2,
        'duration': 2,
        'category': 'Research',
        'total_hours': 66,
        'team': ['Research Team (2)', 'Platform Analyst (1)', 'Compliance Lead (1)'],
        'description': 'Build comprehensive, current knowledge base',
        'key_deliverables': [
            'Industry benchmark data (Manufacturing, Healthcare, Financial Services, Professional Services)',
            'Updated platform database with November 2025 pricing for 125+ platforms',
            'Compliance roadmap (GDPR, CCPA 2026, HIPAA, FedRAMP, SOX)',
            'Emerging platforms added (Siemens Xcelerator, Epic EHR AI, BlackRock Aladdin, Kimble AI)',
            'Real client case studies compiled by industry vertical',
            'INT Inc. service-to-platform capability mapping',
        ],
        'critical_success_factors': [
            'Access to current industry reports (McKinsey, Gartner, Forrester)',
            'Vendor cooperation for roadmap intelligence',
            'Compliance expert availability',
        ],
    },
    {
        'id': 'phase-2',
        'name': '2. Templates & Deliverables',
        'short_name': 'Templates',
        'start_week': 2,
        'end_week': 3,
        'duration': 2,
        'category': 'Development',
        'total_hours': 58,
        'team': ['Design Team (1)', 'Development Team (2)', 'Content Team (1)'],
        'description': 'Create professional, reusable client-facing materials',
        'key_deliverables': [
            'White-label report templates (Executive Summary, Technical Deep-Dive, Board Overview)',
            'Industry-specific assessment wizards (4 verticals minimum)',
            'RFP response templates with auto-population',
            'Case study module with filtering (industry, platform, use case)',
        ],
    },
    {
        'id': 'phase-3',
        'name': '3. Competitive Analysis',
        'short_name': 'Competitive',
        'start_week': 3,
        'end_week': 4,
        'duration': 2,
        'category': 'Analysis',
        'total_hours': 46,
        'team': ['Strategy Team (2)', 'Development Team (1)', 'Partnerships Lead (1)'],
        'description': 'Understand and differentiate from market competitors',
        'key_deliverables': [
            'Big 4 & SI positioning analysis (Deloitte, IBM, Accenture, KPMG, McKinsey)',
            'Interactive competitive matrix dashboard',
            'INT Inc. differentiation playbook by vertical',
            'Vendor partner program opportunities',
        ],
    },
    {
        'id': 'phase-4',
        'name': '4. Advanced Features',
        'short_name': 'Features',
        'start_week': 4,
        'end_week': 6,
        'duration': 3,
        'category': 'Development',
        'total_hours': 96,
        'team': ['Development Team (3)', 'Data Scientist (1)', 'Platform Analyst (1)'],
        'description': 'Build sophisticated analysis and automation capabilities',
        'key_deliverables': [
            'Scenario modeling engine (phased vs. big-bang, ROI sensitivity)',
            'AI maturity scoring algorithm',
            'Automated proposal generation pipeline',
            'Multi-vendor orchestration planning tool',
            'Real-time vendor API integrations',
        ],
    },
    {
        'id': 'phase-5',
        'name': '5. Market Intelligence',
        'short_name': 'Market Intel',
        'start_week': 6,
        'end_week': 7,
        'duration': 2,
        'category': 'Analysis',
        'total_hours': 48,
        'team': ['Research Team (2)', 'Strategy Lead (1)', 'Content Team (1)'],
        'description': 'Develop proprietary market insights and positioning',
        'key_deliverables': [
            'Industry-specific AI adoption reports',
            'Competitive intelligence dashboard',
            'Vendor roadmap tracking system',
            'Market trend analysis tools',
        ],
    },
    {
        'id': 'phase-6',
        'name': '6. Testing & QA',
        'short_name': 'Testing',
        'start_week': 7,
        'end_week': 8,
        'duration': 2,
        'category': 'Testing',
        'total_hours': 56,
        'team': ['QA Team (2)', 'Development Team (1)', 'User Testing Group (5)'],
        'description': 'Ensure platform quality and reliability',
        'key_deliverables': [
            'Comprehensive test suite (unit, integration, E2E)',
            'User acceptance testing results',
            'Performance benchmarks',
            'Security audit report',
            'Accessibility compliance verification',
        ],
    },
    {
        'id': 'phase-7',
        'name': '7. Training & Documentation',
        'short_name': 'Training',
        'start_week': 8,
        'end_week': 9,
        'duration': 2,
        'category': 'Enablement',
        'total_hours': 52,
        'team': ['Training Lead (1)', 'Content Team (2)', 'Subject Matter Experts (3)'],
        'description': 'Enable team members and document processes',
        'key_deliverables': [
            'User training materials (video, guides, quick-start)',
            'Admin documentation',
            'API documentation for integrations',
            'Runbooks for common scenarios',
            'Train-the-trainer program',
        ],
    },
    {
        'id': 'phase-8',
        'name': '8. Board Presentation & Launch',
        'short_name': 'Launch',
        'start_week': 9,
        'end_week': 10,
        'duration': 2,
        'category': 'Launch',
        'total_hours': 50,
        'team': ['Executive Sponsor (1)', 'Strategy Lead (1)', 'Development Lead (1)', 'Marketing (1)'],
        'description': 'Secure approval and execute go-live',
        'key_deliverables': [
            'Executive presentation deck',
            'ROI business case documentation',
            'Go-live checklist completion',
            'Launch communications',
            'Success metrics dashboard',
        ],
    },
]


def _task(task_id: str, task: str, owner: str, deliverable: str, dependencies: List[str], hours: int, week: str) -> Dict[str, Any]:
    phase_number = task_id.split('-')[1]
    return {
        'id': task_id,
        'phase_id': f'phase-{phase_number}',
        'task': task,
        'owner': owner,
        'deliverable': deliverable,
        'status': 'Not Started',
        'dependencies': dependencies,
        'effort_hours': hours,
        'week': week,
    }


ROADMAP_TASKS: List[Dict[str, Any]] = [
    _task('task-1-1', 'Gather industry benchmarks (Manufacturing, Healthcare, Financial Services, Professional Services)', 'Research Team', 'Industry benchmark data spreadsheet', [], 16, 'Week 1'),
    _task('task-1-2', 'Research regulatory roadmaps (GDPR, CCPA 2026, HIPAA, SOX)', 'Compliance Lead', 'Compliance timeline document', [], 8, 'Week 1'),
    _task('task-1-3', 'Update platform database with Nov 2025 pricing, maturity scores, vendor roadmaps', 'Platform Analyst', 'Updated platform database JSON', [], 12, 'Week 1'),
    _task('task-1-4', 'Add emerging platforms (Siemens Xcelerator, Epic EHR AI, BlackRock Aladdin, Kimble AI)', 'Platform Analyst', 'Expanded platform database (140+ platforms)', ['task-1-3'], 10, 'Week 1-2'),
    _task('task-1-5', 'Compile real client case studies and testimonials by industry', 'Content Team', 'Case study library', ['task-1-1'], 12, 'Week 2'),
    _task('task-1-6', 'Map INT Inc. services to AI platform capabilities', 'Strategy Lead', 'Service-platform mapping matrix', ['task-1-3'], 8, 'Week 2'),
    _task('task-2-1', 'Design white-label report templates (Executive Summary, Technical Deep-Dive, Board Overview)', 'Design Team', 'PDF/PPT templates', [], 16, 'Week 2'),
    _task('task-2-2', 'Build industry-specific assessment wizards (4 industries minimum)', 'Development Team', 'Interactive assessment flows', ['task-1-1'], 20, 'Week 2-3'),
    _task('task-2-3', 'Create RFP response templates with auto-population from assessment data', 'Content Team', 'RFP template library', ['task-2-1'], 12, 'Week 3'),
    _task('task-2-4', 'Build case study module with filtering by industry, platform, use case', 'Development Team', 'Case study database UI', ['task-1-5'], 10, 'Week 3'),
    _task('task-3-1', 'Research Big 4 & SI positioning (Deloitte, IBM, Accenture, KPMG, McKinsey)', 'Strategy Team', 'Competitive intelligence report', [], 12, 'Week 3'),
    _task('task-3-2', 'Build competitive matrix dashboard (capabilities, speed, pricing, compliance)', 'Development Team', 'Interactive competitive matrix', ['task-3-1'], 16, 'Week 3-4'),
    _task('task-3-3', 'Document INT Inc. differentiation points for each vertical', 'Strategy Lead', 'Differentiation playbook', ['task-3-2'], 8, 'Week 4'),
    _task('task-3-4', 'Map vendor partner programs and INT Inc. channel opportunities', 'Partnerships Lead', 'Partner program analysis', ['task-1-3'], 10, 'Week 4'),
    _task('task-4-1', 'Build scenario modeling engine (phased vs. big-bang, ROI sensitivity)', 'Development Team', 'Scenario calculator module', ['task-1-3'], 24, 'Week 4'),
    _task('task-4-2', 'Develop AI maturity scoring algorithm with industry benchmarks', 'Data Scientist', 'Maturity score engine', ['task-1-1'], 20, 'Week 4-5'),
    _task('task-4-3', 'Create automated proposal generation pipeline', 'Development Team', 'Proposal automation system', ['task-2-1', 'task-4-2'], 24, 'Week 5'),
    _task('task-4-4', 'Build multi-vendor orchestration planning tool', 'Development Team', 'Vendor orchestration UI', ['task-1-3'], 16, 'Week 5-6'),
    _task('task-4-5', 'Implement real-time vendor API integrations', 'Platform Analyst', 'Live pricing & availability feeds', ['task-1-3'], 12, 'Week 6'),
    _task('task-5-1', 'Develop industry-specific AI adoption reports', 'Research Team', '4 industry white papers', ['task-1-1', 'task-1-5'], 16, 'Week 6'),
    _task('task-5-2', 'Build competitive intelligence dashboard', 'Development Team', 'Live competitive tracker', ['task-3-1'], 12, 'Week 6-7'),
    _task('task-5-3', 'Create vendor roadmap tracking system', 'Platform Analyst', 'Roadmap visualization tool', ['task-1-3'], 10, 'Week 7'),
    _task('task-5-4', 'Build market trend analysis tools', 'Data Scientist', 'Trend analytics dashboard', ['task-4-2'], 10, 'Week 7'),
    _task('task-6-1', 'Develop comprehensive test suite (unit, integration, E2E)', 'QA Team', 'Automated test coverage', ['task-4-3'], 20, 'Week 7'),
    _task('task-6-2', 'Conduct user acceptance testing with pilot group', 'QA Team', 'UAT report & feedback', ['task-6-1'], 16, 'Week 7-8'),
    _task('task-6-3', 'Run performance benchmarks and optimization', 'Development Team', 'Performance report', ['task-6-1'], 10, 'Week 8'),
    _task('task-6-4', 'Complete security audit and penetration testing', 'Security Team', 'Security audit report', ['task-6-1'], 10, 'Week 8'),
    _task('task-7-1', 'Create user training materials (video tutorials, guides)', 'Training Lead', 'Training content library', ['task-6-2'], 16, 'Week 8'),
    _task('task-7-2', 'Write admin and developer documentation', 'Content Team', 'Technical documentation', ['task-6-2'], 12, 'Week 8-9'),
    _task('task-7-3', 'Develop API documentation for partner integrations', 'Development Team', 'API reference guide', ['task-4-5'], 10, 'Week 9'),
    _task('task-7-4', 'Create operational runbooks for common scenarios', 'Operations Team', 'Runbook library', ['task-6-2'], 8, 'Week 9'),
    _task('task-7-5', 'Conduct train-the-trainer sessions', 'Training Lead', 'Certified trainers', ['task-7-1'], 6, 'Week 9'),
    _task('task-8-1', 'Prepare executive presentation deck', 'Strategy Lead', 'Board presentation', ['task-5-1', 'task-6-2'], 12, 'Week 9'),
    _task('task-8-2', 'Finalize ROI business case documentation', 'Strategy Lead', 'ROI analysis package', ['task-4-1'], 8, 'Week 9-10'),
    _task('task-8-3', 'Complete go-live checklist and runthrough', 'Development Lead', 'Go-live sign-off', ['task-6-4', 'task-7-2'], 10, 'Week 10'),
    _task('task-8-4', 'Execute launch communications plan', 'Marketing', 'Launch announcements', ['task-8-1'], 8, 'Week 10'),
    _task('task-8-5', 'Deploy success metrics dashboard', 'Development Team', 'Live metrics tracking', ['task-8-3'], 12, 'Week 10'),
]

FEATURE_AREAS: List[Dict[str, Any]] = [
    {
        'id': 'reporting',
        'name': 'AI Reporting Engine Enhancements',
        'features': [
            {'name': 'Rich Data Visualizations', 'status': 'in-progress', 'progress': 65},
            {'name': 'Report Scheduling UI', 'status': 'planned', 'progress': 0},
        ],
    },
    {
        'id': 'collaboration',
        'name': 'Collaboration Features',
        'features': [
            {'name': 'Real-time Comments', 'status': 'planned', 'progress': 0},
            {'name': 'Shared Workspaces', 'status': 'planned', 'progress': 0},
        ],
    },
    {
        'id': 'analytics',
        'name': 'Advanced Analytics',
        'features': [
            {'name': 'Predictive Insights', 'status': 'in-progress', 'progress': 30},
            {'name': 'Custom Dashboards', 'status': 'completed', 'progress': 100},
        ],
    },
    {
        'id': 'governance',
        'name': 'AI Governance Tools',
        'features': [
            {'name': 'Policy Enforcement', 'status': 'in-progress', 'progress': 45},
            {'name': 'Audit Trail', 'status': 'completed', 'progress': 100},
        ],
    },
]
