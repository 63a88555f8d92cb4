"""
INT Inc. skills framework: front-of-house departments and the AI-powered
skills each one delivers to clients.
"""

from typing import Any, Dict, List, Tuple

SKILL_CATEGORIES = ['Client-Facing', 'Technical', 'Process', 'Enablement']
AUTOMATION_POTENTIALS = ['Low', 'Medium', 'High']


def _skills(rows: List[Tuple]) -> List[Dict[str, Any]]:
    keys = ('id', 'name', 'description', 'category', 'ai_tools',
            'automation_potential', 'time_savings', 'complexity')
    return [dict(zip(keys, row)) for row in rows]


SKILL_DEPARTMENTS: List[Dict[str, Any]] = [
    {
        'id': 'information-security',
        'name': 'Information Security',
        'short_name': 'InfoSec',
        'type': 'Front-of-House',
        'description': 'Cyberattack prevention, compliance, and GRC platform implementation.',
        'client_value_prop': 'Cyberattacks? Not on our watch. Strengthen security and reduce risks.',
        'key_partnerships': ['Vanta', 'KnowBe4', 'SOC auditors', 'Penetration testing vendors'],
        'client_types': ['SaaS', 'Healthcare', 'Fintech', 'Professional services'],
        'typical_project': 'Security audit + SOC 2 compliance + GRC platform + ongoing monitoring',
        'front_of_house_roles': ['Information Security Lead', 'Security Analyst', 'GRC Consultant', 'Security Awareness Trainer'],
        'back_of_house_roles': ['Compliance Documentation Manager', 'SOC Auditor Liaison', 'Vendor Management'],
        'skills': _skills([
            ('soc2-readiness', 'SOC 2 Readiness Assessor', 'Analyzes client environment, generates gap analysis, recommends remediation path', 'Client-Facing', ['Claude', 'Copilot'], 'High', '8 hrs/assessment', 'Advanced'),
            ('security-risk', 'Security Risk Analyzer', 'Scores client risk profile, identifies critical vulnerabilities, prioritizes remediation', 'Client-Facing', ['Claude', 'Perplexity'], 'High', '6 hrs/audit', 'Advanced'),
            ('compliance-roadmap', 'Compliance Roadmap Generator', 'Creates phased SOC 2 implementation plan with milestones and dependencies', 'Client-Facing', ['Claude', 'Copilot'], 'High', '4 hrs/roadmap', 'Intermediate'),
            ('grc-implementer', 'GRC Platform Implementer', 'Configures Vanta for client, maps controls to compliance requirements', 'Technical', ['Copilot', 'n8n'], 'Medium', '12 hrs/setup', 'Advanced'),
            ('vendor-risk', 'Vendor Risk Assessor', 'Evaluates client third-party vendors for security risk', 'Client-Facing', ['Perplexity', 'Claude'], 'Medium', '3 hrs/vendor', 'Intermediate'),
            ('security-maturity', 'Client Security Maturity Model Scorer', 'Benchmarks client against CMM/NIST framework', 'Process', ['Claude', 'Copilot'], 'High', '4 hrs/assessment', 'Advanced'),
            ('threat-monitor', 'Threat Landscape Monitor', 'Tracks emerging threats relevant to client industry', 'Process', ['Perplexity', 'Claude'], 'High', '3 hrs/week', 'Intermediate'),
            ('security-translator', 'Security Terminology Translator', 'Explains security concepts in plain language for non-technical clients', 'Enablement', ['Claude', 'GPT-4o'], 'High', '1 hr/doc', 'Beginner'),
        ]),
    },
    {
        'id': 'technology-it',
        'name': 'Technology / IT Services',
        'short_name': 'IT',
        'type': 'Front-of-House',
        'description': 'Managed IT, 24/7 helpdesk, and proactive monitoring.',
        'client_value_prop': 'Make tech work for you. From IT support to network security to data insights.',
        'key_partnerships': ['Microsoft', 'Bitwarden', 'Duo/Okta', 'ConnectWise', 'Datto', 'Cisco'],
        'client_types': ['SMB', 'Professional services', 'Healthcare', 'Fintech'],
        'typical_project': 'Managed IT support, helpdesk for 50-500 users, proactive monitoring, M365 admin',
        'front_of_house_roles': ['Account Manager', 'Service Desk Manager', 'Service Tech L1-3', 'Network Administrator', 'Systems Administrator', 'Cloud Architect'],
        'back_of_house_roles': ['KB Manager', 'Vendor Liaison', 'Asset Management', 'Compliance Officer'],
        'skills': _skills([
            ('ticket-intake', 'Smart Ticket Intake Assistant', 'Reads inbound ticket, generates pre-flight checklist, asks proactive questions', 'Client-Facing', ['Claude', 'Copilot'], 'High', '10 min/ticket', 'Intermediate'),
            ('kb-architect', 'KB Article Architect', 'After ticket close, generates KB article template for tech to complete', 'Client-Facing', ['Claude', 'Notion AI'], 'High', '30 min/article', 'Beginner'),
            ('m365-troubleshoot', 'M365 Auth Troubleshooter', 'Guides through MFA/Entra ID/Exchange issues', 'Client-Facing', ['Copilot', 'Claude'], 'High', '20 min/issue', 'Intermediate'),
            ('severity-classifier', 'Ticket Severity Auto-Classifier', 'Analyzes ticket content, suggests P0/P1/P2/P3 severity + SLA implications', 'Client-Facing', ['Claude', 'n8n'], 'High', '5 min/ticket', 'Intermediate'),
            ('m365-optimizer', 'M365 Tenant Optimizer', 'Audits M365 setup, identifies unused licenses, security gaps', 'Technical', ['Copilot', 'Claude'], 'High', '3 hrs/audit', 'Advanced'),
            ('backup-validator', 'Backup & Disaster Recovery Validator', 'Tests client backup strategy, validates recovery procedures', 'Technical', ['Copilot', 'n8n'], 'Medium', '4 hrs/validation', 'Advanced'),
            ('vendor-scorecard', 'Vendor Performance Scorecard Builder', 'Tracks ISP uptime, Microsoft service health, flags SLA misses', 'Process', ['Power BI', 'n8n'], 'High', '2 hrs/week', 'Intermediate'),
            ('tech-onboarding', 'Service Tech Onboarding Guide Creator', 'Generates new-hire playbook for client account', 'Enablement', ['Claude', 'Notion AI'], 'High', '4 hrs/guide', 'Intermediate'),
        ]),
    },
    {
        'id': 'web-development',
        'name': 'Website Design & Development',
        'short_name': 'Web',
        'type': 'Front-of-House',
        'description': 'Responsive web design, UX/UI, WCAG compliance, eCommerce, SEO.',
        'client_value_prop': 'Website that makes people take notice. Captures attention, boosts conversions.',
        'key_partnerships': ['Shopify', 'WordPress', 'Figma', 'React/Next.js'],
        'client_types': ['E-commerce', 'Professional services', 'Healthcare', 'B2B SaaS'],
        'typical_project': 'Website redesign (UX/UI + dev) with SEO, eCommerce setup, CMS training',
        'front_of_house_roles': ['Web Designer / UX Lead', 'Frontend Developer', 'Backend Developer', 'eCommerce Specialist', 'SEO Specialist', 'Web Trainer'],
        'back_of_house_roles': ['Design System Manager', 'Code Repository Manager', 'Performance Monitor', 'Accessibility Auditor'],
        'skills': _skills([
            ('website-audit', 'Website Audit & Gap Analysis', 'Audits existing site (speed, accessibility, SEO, mobile), generates scorecard', 'Client-Facing', ['Claude', 'Perplexity'], 'High', '4 hrs/audit', 'Intermediate'),
            ('seo-analyzer', 'SEO Health Analyzer', 'Audits on-page SEO, backlinks, technical SEO, generates keyword opportunity report', 'Client-Facing', ['Perplexity', 'Claude'], 'High', '4 hrs/audit', 'Intermediate'),
            ('accessibility-checklist', 'Accessibility Checklist Generator', 'Generates WCAG 2.1 compliance checklist for site, prioritizes fixes', 'Client-Facing', ['Claude', 'Copilot'], 'High', '2 hrs/checklist', 'Intermediate'),
            ('design-system', 'Design System Documenter', 'Creates/maintains component library, generates design tokens + code', 'Technical', ['Claude', 'Cursor'], 'Medium', '8 hrs/system', 'Advanced'),
            ('performance-optimizer', 'Frontend Performance Optimizer', 'Audits page speed, identifies bottlenecks, recommends optimizations', 'Technical', ['Claude', 'Copilot'], 'High', '3 hrs/audit', 'Advanced'),
            ('payment-integrator', 'Payment Gateway Integrator', 'Implements Stripe, PayPal, or custom payment flows, validates PCI-DSS', 'Technical', ['Cursor', 'Claude'], 'Medium', '8 hrs/integration', 'Advanced'),
            ('cms-training', 'Client CMS Training Path Creator', 'Generates step-by-step CMS training tailored to client workflows', 'Enablement', ['Claude', 'Notion AI'], 'High', '3 hrs/path', 'Beginner'),
            ('migration-playbook', 'Site Migration Playbook Generator', 'Generates step-by-step plan for old site to new site migrations', 'Enablement', ['Claude', 'Copilot'], 'High', '4 hrs/playbook', 'Intermediate'),
        ]),
    },
    {
        'id': 'branding',
        'name': 'Branding & Identity',
        'short_name': 'Brand',
        'type': 'Front-of-House',
        'description': 'Brand strategy, logo design, visual identity systems, messaging frameworks.',
        'client_value_prop': 'Develop brand identity that tells your story, resonates with audience.',
        'key_partnerships': ['Figma', 'Adobe Creative Suite', 'Design systems platforms'],
        'client_types': ['Startups', 'Professional services', 'Nonprofits', 'B2B SaaS'],
        'typical_project': 'Brand audit + messaging framework + logo + design system + brand guidelines',
        'front_of_house_roles': ['Brand Strategist', 'Logo / Visual Designer', 'Brand Guidelines Writer', 'Creative Director'],
        'back_of_house_roles': ['Design Asset Manager', 'Brand Template Manager'],
        'skills': _skills([
            ('positioning-workshop', 'Brand Positioning Workshop Facilitator', 'Guides client through brand positioning, identifies unique value prop', 'Client-Facing', ['Claude', 'Miro AI'], 'Medium', '4 hrs/workshop', 'Advanced'),
            ('competitor-brand', 'Competitor Brand Analyzer', 'Audits competitor branding, identifies differentiation opportunity', 'Client-Facing', ['Perplexity', 'Claude'], 'High', '4 hrs/analysis', 'Intermediate'),
            ('messaging-framework', 'Brand Messaging Framework Creator', 'Develops key brand messages, taglines, brand voice guidelines', 'Client-Facing', ['Claude', 'Jasper'], 'High', '6 hrs/framework', 'Advanced'),
            ('logo-concept', 'Logo Concept Generator', 'Creates multiple logo concepts aligned to brand positioning', 'Technical', ['Midjourney', 'DALL-E 3'], 'Medium', '4 hrs/concepts', 'Advanced'),
            ('color-palette', 'Color Palette Designer', 'Generates color palette ensuring accessibility (contrast)', 'Technical', ['Claude', 'Figma AI'], 'High', '2 hrs/palette', 'Intermediate'),
            ('brand-guidelines', 'Brand Guidelines Document Generator', 'Creates comprehensive brand guidelines (logo usage, spacing, colors)', 'Enablement', ['Claude', 'Copilot'], 'High', '8 hrs/doc', 'Intermediate'),
            ('voice-guide', 'Brand Voice & Tone Guide Creator', 'Defines how client brand "speaks" (professional vs. casual)', 'Enablement', ['Claude', 'Jasper'], 'High', '4 hrs/guide', 'Intermediate'),
            ('brand-compliance', 'Client Brand Compliance Checker', 'Audits client marketing materials, flags brand guideline violations', 'Enablement', ['Claude', 'Copilot'], 'High', '2 hrs/audit', 'Beginner'),
        ]),
    },
]

SKILLS_FRAMEWORK_STATS: Dict[str, Any] = {
    'total_departments': 16,
    'skills_per_department': 20,
    'total_skills': 320,
    'automation_potential_high': 180,
    'automation_potential_medium': 100,
    'automation_potential_low': 40,
    'average_time_savings': '3.5 hrs/task',
    'key_ai_tools': ['Claude', 'Copilot', 'Perplexity', 'n8n', 'Jasper', 'Power BI', 'Cursor'],
}
