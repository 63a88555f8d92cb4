"""
Client persona catalog (who INT Inc. sells to) and employee persona builder
option lists (how an individual likes to work with AI).
"""

from typing import Any, Dict, List

# =============================================================================
# CLIENT PERSONAS
# =============================================================================

CLIENT_PERSONAS: List[Dict[str, Any]] = [
    {
        'id': 'cmo',
        'role': 'CMO',
        'title': 'Chief Marketing Officer',
        'industry': ['SaaS', 'Technology', 'Retail', 'Financial Services'],
        'company_size': '100-1000 employees',
        'goals': [
            'Drive brand awareness and market positioning',
            'Increase marketing ROI and attribution accuracy',
            'Accelerate content production without sacrificing quality',
            'Personalize customer experiences at scale',
        ],
        'pain_points': [
            'Content creation bottlenecks limiting campaign velocity',
            'Difficulty measuring true marketing impact on revenue',
            'Fragmented customer data across platforms',
            'Keeping pace with AI-powered competitors',
        ],
        'success_metrics': [
            'Marketing Qualified Leads (MQLs)', 'Customer Acquisition Cost (CAC)',
            'Brand sentiment scores', 'Content engagement rates',
        ],
        'tech_proficiency': 'Strategic',
        'budget_tier': 'High',
        'decision_authority': 'Budget Owner',
        'ai_use_cases': [
            'AI-powered content generation and optimization',
            'Predictive analytics for campaign performance',
            'Customer segmentation and personalization',
            'Competitive intelligence automation',
        ],
        'related_services': ['brand-strategy', 'managed-marketing', 'content-strategy'],
        'confidence': 'high',
    },
    {
        'id': 'ops-lead',
        'role': 'Ops Lead',
        'title': 'Operations Lead / COO',
        'industry': ['Manufacturing', 'Logistics', 'Healthcare', 'Professional Services'],
        'company_size': '50-500 employees',
        'goals': [
            'Streamline operational processes and reduce waste',
            'Improve cross-functional collaboration',
            'Automate repetitive workflows',
            'Maintain compliance while scaling operations',
        ],
        'pain_points': [
            'Manual processes consuming team bandwidth',
            'Data silos preventing unified operational view',
            'Difficulty scaling processes with growth',
            'Compliance documentation overhead',
        ],
        'success_metrics': [
            'Process cycle time reduction', 'Operational cost savings',
            'Employee productivity metrics', 'Compliance audit scores',
        ],
        'tech_proficiency': 'Medium',
        'budget_tier': 'Medium',
        'decision_authority': 'Decision Maker',
        'ai_use_cases': [
            'Workflow automation and orchestration',
            'Document processing and extraction',
            'Process mining and optimization',
            'Compliance monitoring automation',
        ],
        'related_services': ['operations-consulting', 'process-automation', 'ai-integration'],
        'confidence': 'high',
    },
    {
        'id': 'founder',
        'role': 'Founder',
        'title': 'Founder / CEO',
        'industry': ['Startups', 'SaaS', 'E-commerce', 'Consulting'],
        'company_size': '5-50 employees',
        'goals': [
            'Accelerate product-market fit discovery',
            'Maximize team productivity with limited resources',
            'Build competitive advantage through AI adoption',
            'Scale operations without proportional headcount',
        ],
        'pain_points': [
            'Wearing too many hats with limited time',
            'Need enterprise-grade AI on startup budget',
            'Uncertainty about which AI tools deliver real ROI',
            'Integration complexity across existing tools',
        ],
        'success_metrics': [
            'Revenue growth rate', 'Burn rate efficiency',
            'Time-to-market for features', 'Customer retention rate',
        ],
        'tech_proficiency': 'Expert',
        'budget_tier': 'Low',
        'decision_authority': 'Budget Owner',
        'ai_use_cases': [
            'AI-powered customer support automation',
            'Code generation and development acceleration',
            'Market research and competitive analysis',
            'Sales outreach personalization',
        ],
        'related_services': ['startup-fundamentals', 'ai-integration', 'growth-engineering'],
        'confidence': 'high',
    },
    {
        'id': 'product-manager',
        'role': 'Product Manager',
        'title': 'Product Manager / Director of Product',
        'industry': ['SaaS', 'Technology', 'Fintech', 'Healthcare Tech'],
        'company_size': '50-500 employees',
        'goals': [
            'Accelerate feature discovery and validation',
            'Improve user research synthesis efficiency',
            'Reduce time from ideation to launch',
            'Build AI-native product features',
        ],
        'pain_points': [
            'Drowning in customer feedback without actionable insights',
            'Slow iteration cycles limiting experimentation',
            'Difficulty prioritizing with competing stakeholder demands',
            'Gap between AI vision and engineering capacity',
        ],
        'success_metrics': [
            'Feature adoption rates', 'Time-to-value for new releases',
            'Net Promoter Score (NPS)', 'Sprint velocity',
        ],
        'tech_proficiency': 'Expert',
        'budget_tier': 'Medium',
        'decision_authority': 'Recommender',
        'ai_use_cases': [
            'User feedback analysis and sentiment tracking',
            'Competitive feature benchmarking',
            'Automated PRD and spec generation',
            'AI feature prototyping and testing',
        ],
        'related_services': ['ux-ui-design', 'web-development', 'ai-integration'],
        'confidence': 'high',
    },
    {
        'id': 'ecommerce-manager',
        'role': 'Ecommerce Manager',
        'title': 'E-commerce Manager / Digital Commerce Director',
        'industry': ['Retail', 'D2C', 'Consumer Goods', 'Fashion'],
        'company_size': '20-200 employees',
        'goals': [
            'Increase online conversion rates',
            'Personalize shopping experiences at scale',
            'Optimize inventory and pricing dynamically',
            'Reduce cart abandonment rates',
        ],
        'pain_points': [
            'Product catalog management complexity',
            'Customer service scaling during peak seasons',
            'Attribution across multiple sales channels',
            'Keeping product descriptions fresh and optimized',
        ],
        'success_metrics': [
            'Conversion rate (CVR)', 'Average order value (AOV)',
            'Customer lifetime value (CLV)', 'Return rate reduction',
        ],
        'tech_proficiency': 'Medium',
        'budget_tier': 'Medium',
        'decision_authority': 'Decision Maker',
        'ai_use_cases': [
            'AI product descriptions and SEO optimization',
            'Chatbot for customer support and recommendations',
            'Dynamic pricing optimization',
            'Visual search and product matching',
        ],
        'related_services': ['web-development', 'content-strategy', 'managed-marketing'],
        'confidence': 'high',
    },
    {
        'id': 'vp-sales',
        'role': 'VP Sales',
        'title': 'VP of Sales / Chief Revenue Officer',
        'industry': ['SaaS', 'Technology', 'Professional Services', 'Manufacturing'],
        'company_size': '100-1000 employees',
        'goals': [
            'Accelerate pipeline velocity and deal closure',
            'Improve sales rep productivity and quota attainment',
            'Enhance forecasting accuracy',
            'Reduce sales cycle length',
        ],
        'pain_points': [
            'Reps spending too much time on admin vs. selling',
            'Inconsistent deal qualification and pipeline hygiene',
            'Difficulty scaling personalized outreach',
            'Forecast misses impacting business planning',
        ],
        'success_metrics': [
            'Revenue growth', 'Win rate improvement',
            'Average deal size', 'Sales cycle length',
        ],
        'tech_proficiency': 'Medium',
        'budget_tier': 'High',
        'decision_authority': 'Budget Owner',
        'ai_use_cases': [
            'AI-powered email and call scripts',
            'Deal scoring and prioritization',
            'Automated CRM data entry and enrichment',
            'Conversation intelligence and coaching',
        ],
        'related_services': ['managed-marketing', 'crm-implementation', 'ai-integration'],
        'confidence': 'high',
    },
    {
        'id': 'cto',
        'role': 'CTO',
        'title': 'Chief Technology Officer / VP Engineering',
        'industry': ['SaaS', 'Technology', 'Fintech', 'Healthcare'],
        'company_size': '50-500 employees',
        'goals': [
            'Accelerate development velocity without sacrificing quality',
            'Reduce technical debt and improve codebase health',
            'Implement AI/ML capabilities in products',
            'Attract and retain top engineering talent',
        ],
        'pain_points': [
            'Developer time consumed by repetitive tasks',
            'Knowledge silos and onboarding friction',
            'Balancing innovation with maintenance',
            'Security and compliance requirements slowing delivery',
        ],
        'success_metrics': [
            'Deployment frequency', 'Mean time to recovery (MTTR)',
            'Code review turnaround', 'Developer satisfaction scores',
        ],
        'tech_proficiency': 'Expert',
        'budget_tier': 'High',
        'decision_authority': 'Budget Owner',
        'ai_use_cases': [
            'AI code generation and review',
            'Automated testing and QA',
            'Documentation generation',
            'Security vulnerability detection',
        ],
        'related_services': ['web-development', 'ai-integration', 'security-consulting'],
        'confidence': 'high',
    },
    {
        'id': 'cs-lead',
        'role': 'CS Lead',
        'title': 'Customer Success Lead / VP Customer Experience',
        'industry': ['SaaS', 'Technology', 'E-commerce', 'Financial Services'],
        'company_size': '50-500 employees',
        'goals': [
            'Reduce churn and increase net revenue retention',
            'Scale customer support without proportional headcount',
            'Proactively identify at-risk accounts',
            'Improve customer satisfaction and NPS',
        ],
        'pain_points': [
            'Ticket volume exceeding team capacity',
            'Inconsistent support quality across channels',
            'Difficulty predicting churn before it happens',
            'Knowledge base maintenance overhead',
        ],
        'success_metrics': [
            'Net Revenue Retention (NRR)', 'Customer Satisfaction (CSAT)',
            'First response time', 'Ticket resolution rate',
        ],
        'tech_proficiency': 'Medium',
        'budget_tier': 'Medium',
        'decision_authority': 'Decision Maker',
        'ai_use_cases': [
            'AI-powered ticket routing and response',
            'Churn prediction and health scoring',
            'Self-service knowledge base automation',
            'Sentiment analysis across touchpoints',
        ],
        'related_services': ['ai-integration', 'process-automation', 'crm-implementation'],
        'confidence': 'high',
    },
]

INT_SERVICES: List[Dict[str, Any]] = [
    {
        'slug': 'brand-strategy',
        'name': 'Brand Strategy',
        'short_description': 'Develop brand identity that tells your story and resonates with your audience.',
        'industries_implied': ['SaaS', 'Professional Services', 'Retail', 'Technology'],
        'roles_implied': ['CMO', 'Founder', 'Marketing Director'],
        'pain_points': [
            'Inconsistent brand messaging across channels',
            'Difficulty differentiating from competitors',
            'Brand not resonating with target audience',
        ],
        'value_props': [
            'Unified brand voice and visual identity',
            'Competitive differentiation strategy',
            'Brand guidelines for consistent execution',
        ],
        'deliverables': ['Brand positioning statement', 'Visual identity system', 'Brand guidelines document', 'Messaging framework'],
        'confidence': 'high',
    },
    {
        'slug': 'ux-ui-design',
        'name': 'UX/UI Design',
        'short_description': 'Create intuitive, beautiful interfaces that users love.',
        'industries_implied': ['SaaS', 'Technology', 'E-commerce', 'Fintech'],
        'roles_implied': ['Product Manager', 'CTO', 'Founder'],
        'pain_points': [
            'Poor user adoption due to confusing interfaces',
            'High customer support volume from UX issues',
            'Conversion bottlenecks in user flows',
        ],
        'value_props': ['User-centered design process', 'Improved conversion rates', 'Reduced support burden'],
        'deliverables': ['User research insights', 'Wireframes and prototypes', 'Design system components', 'Usability testing reports'],
        'confidence': 'high',
    },
    {
        'slug': 'growth-engineering',
        'name': 'Growth Engineering',
        'short_description': 'Build and optimize systems for sustainable growth.',
        'industries_implied': ['SaaS', 'Technology', 'E-commerce'],
        'roles_implied': ['Founder', 'CTO', 'VP Sales', 'CMO'],
        'pain_points': [
            'Slow time-to-market for growth experiments',
            'Lack of data infrastructure for optimization',
            'Manual processes limiting scale',
        ],
        'value_props': ['Rapid experimentation capability', 'Data-driven decision making', 'Automated growth loops'],
        'deliverables': ['Growth strategy roadmap', 'A/B testing infrastructure', 'Analytics implementation', 'Automation workflows'],
        'confidence': 'high',
    },
    {
        'slug': 'ai-integration',
        'name': 'AI Integration',
        'short_description': 'Implement AI solutions that drive real business outcomes.',
        'industries_implied': ['SaaS', 'Technology', 'Healthcare', 'Financial Services'],
        'roles_implied': ['CTO', 'Ops Lead', 'Product Manager', 'Founder'],
        'pain_points': [
            'Uncertainty about AI ROI and use cases',
            'Integration complexity with existing systems',
            'Lack of internal AI expertise',
        ],
        'value_props': [
            'Proven AI implementation methodology',
            'Vendor-agnostic platform selection',
            'Measurable ROI from AI initiatives',
        ],
        'deliverables': [
            'AI readiness assessment', 'Platform recommendation report',
            'Integration implementation', 'Team training and enablement',
        ],
        'confidence': 'high',
    },
]

CASE_STUDIES: List[Dict[str, Any]] = [
    {
        'id': 'northwind-saas',
        'title': 'Northwind SaaS Growth',
        'client_name': 'Northwind Technologies',
        'industry': 'B2B SaaS',
        'problem': 'Customer churn rate of 8.2% was eroding growth gains. Support team overwhelmed with repetitive inquiries.',
        'solution': 'Implemented AI-powered customer health scoring with proactive outreach automation. Deployed conversational AI for tier-1 support.',
        'outcome': 'Reduced churn by 2.9 percentage points within 6 months. Support team handles 40% more tickets with same headcount.',
        'metrics': [
            {'name': 'Churn Reduction', 'value': '-2.9%'},
            {'name': 'Support Capacity', 'value': '+40%'},
            {'name': 'NPS Improvement', 'value': '+15 pts'},
        ],
        'roles_mentioned': ['CS Lead', 'CTO', 'Ops Lead'],
        'services_used': ['ai-integration', 'process-automation'],
        'confidence': 'high',
    },
    {
        'id': 'contoso-retail',
        'title': 'Contoso Retail Conversion',
        'client_name': 'Contoso Retail Group',
        'industry': 'E-commerce',
        'problem': 'Conversion rate stalled at 1.8%. Product catalog of 50,000 SKUs with inconsistent descriptions hurting SEO.',
        'solution': 'Deployed AI product description generator with SEO optimization. Implemented visual search and personalized recommendations.',
        'outcome': 'Conversion rate increased to 2.1% (+18% improvement). Organic traffic up 35% within 4 months.',
        'metrics': [
            {'name': 'CVR Lift', 'value': '+18%'},
            {'name': 'Organic Traffic', 'value': '+35%'},
            {'name': 'Descriptions Updated', 'value': '50K'},
        ],
        'roles_mentioned': ['Ecommerce Manager', 'CMO', 'Product Manager'],
        'services_used': ['content-strategy', 'ai-integration', 'web-development'],
        'confidence': 'high',
    },
    {
        'id': 'fabrikam-fintech',
        'title': 'Fabrikam Fintech Rebrand',
        'client_name': 'Fabrikam Financial',
        'industry': 'Fintech',
        'problem': 'Outdated brand identity limiting enterprise sales. Sales cycle averaging 9 months with low win rate.',
        'solution': 'Complete brand repositioning with AI-powered sales enablement. Implemented conversation intelligence for coaching.',
        'outcome': 'Sales pipeline doubled within 90 days. Average deal size increased 25%.',
        'metrics': [
            {'name': 'Pipeline Growth', 'value': '2x'},
            {'name': 'Deal Size', 'value': '+25%'},
            {'name': 'Sales Cycle', 'value': '-22%'},
        ],
        'roles_mentioned': ['VP Sales', 'CMO', 'Founder'],
        'services_used': ['brand-strategy', 'ai-integration', 'managed-marketing'],
        'confidence': 'high',
    },
]


def _rec(platform_id: str, platform_name: str, ecosystem: str, relevance_score: int,
         use_cases: List[str], rationale: str) -> Dict[str, Any]:
    return {
        'platform_id': platform_id,
        'platform_name': platform_name,
        'ecosystem': ecosystem,
        'relevance_score': relevance_score,
        'use_cases': use_cases,
        'rationale': rationale,
    }


AI_TOOL_RECOMMENDATIONS: Dict[str, List[Dict[str, Any]]] = {
    'cmo': [
        _rec('jasper', 'Jasper', 'independent', 95, ['Marketing content generation', 'Brand voice consistency'], 'Purpose-built for marketing teams with brand voice training'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 92, ['Strategy documents', 'Campaign analysis'], 'Superior reasoning for complex marketing strategy'),
        _rec('perplexity-pro', 'Perplexity Pro', 'independent', 88, ['Competitive research', 'Market intelligence'], 'Real-time web search with citations for credible research'),
        _rec('microsoft-copilot-365', 'Microsoft 365 Copilot', 'microsoft', 85, ['Presentations', 'Email drafting'], 'Deep integration with existing Office workflows'),
        _rec('midjourney', 'Midjourney', 'independent', 82, ['Campaign visuals', 'Social media assets'], 'Highest quality image generation for brand content'),
        _rec('notion-ai', 'Notion AI', 'independent', 78, ['Marketing docs', 'Team collaboration'], 'Integrated writing assistant for marketing documentation'),
    ],
    'ops-lead': [
        _rec('zapier-ai', 'Zapier Central', 'automation', 95, ['Workflow automation', 'Cross-app integrations'], 'No-code automation accessible to operations teams'),
        _rec('n8n', 'n8n', 'automation', 90, ['Complex workflows', 'Self-hosted automation'], 'Self-hosted option for compliance-sensitive operations'),
        _rec('microsoft-copilot-365', 'Microsoft 365 Copilot', 'microsoft', 88, ['Process documentation', 'Data analysis'], 'Excel and SharePoint integration for operational data'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 85, ['SOP generation', 'Process documentation'], 'Excellent at creating structured operational documents'),
        _rec('make-ai', 'Make', 'automation', 82, ['Visual workflows', 'API integrations'], 'Visual workflow builder for complex operational processes'),
        _rec('notion-ai', 'Notion AI', 'independent', 78, ['Knowledge base', 'Team wiki'], 'Central knowledge repository for operational procedures'),
    ],
    'founder': [
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 95, ['Strategy', 'Coding', 'Analysis'], 'Best all-around capability for founders wearing multiple hats'),
        _rec('cursor', 'Cursor', 'independent', 92, ['Rapid prototyping', 'Code development'], 'Accelerates development for technical founders'),
        _rec('perplexity-pro', 'Perplexity Pro', 'independent', 88, ['Market research', 'Competitor analysis'], 'Fast research with reliable sources for decision-making'),
        _rec('gpt-4o', 'GPT-4o', 'openai', 85, ['Multimodal tasks', 'General assistance'], 'Most versatile for varied founder responsibilities'),
        _rec('zapier-ai', 'Zapier Central', 'automation', 82, ['Tool integration', 'Workflow automation'], 'Connects startup tools without engineering resources'),
        _rec('chatgpt-plus', 'ChatGPT Plus', 'openai', 78, ['General tasks', 'Brainstorming'], 'Low cost entry point with broad capabilities'),
    ],
    'product-manager': [
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 95, ['PRD writing', 'User story generation'], 'Superior at structured product documentation'),
        _rec('perplexity-pro', 'Perplexity Pro', 'independent', 90, ['Competitive analysis', 'Feature research'], 'Research competitors and market trends with citations'),
        _rec('notion-ai', 'Notion AI', 'independent', 88, ['Product docs', 'Team collaboration'], 'Native integration with common PM workflow tools'),
        _rec('gpt-4o', 'GPT-4o', 'openai', 85, ['User feedback analysis', 'Prototyping ideas'], 'Multimodal capability for analyzing product data'),
        _rec('github-copilot', 'GitHub Copilot', 'microsoft', 80, ['Understanding code', 'Technical specs'], 'Helps bridge gap between PM and engineering'),
        _rec('cursor', 'Cursor', 'independent', 75, ['Prototype building', 'Code review'], 'Enables PMs to build quick prototypes'),
    ],
    'ecommerce-manager': [
        _rec('jasper', 'Jasper', 'independent', 95, ['Product descriptions', 'SEO content'], 'Templates specifically for e-commerce content'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 90, ['Bulk descriptions', 'Catalog optimization'], 'Handles large-scale product content generation'),
        _rec('midjourney', 'Midjourney', 'independent', 88, ['Product imagery', 'Lifestyle photos'], 'High-quality visuals for product marketing'),
        _rec('gpt-4o', 'GPT-4o', 'openai', 85, ['Customer support', 'Product Q&A'], 'Powers chatbots for customer inquiries'),
        _rec('zapier-ai', 'Zapier Central', 'automation', 82, ['Order automation', 'Inventory sync'], 'Connects Shopify, fulfillment, and inventory systems'),
        _rec('perplexity-pro', 'Perplexity Pro', 'independent', 78, ['Market trends', 'Competitor pricing'], 'Research competitor strategies and market trends'),
    ],
    'vp-sales': [
        _rec('gpt-4o', 'GPT-4o', 'openai', 95, ['Email personalization', 'Call prep'], 'Most natural conversation and personalization'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 92, ['Proposal writing', 'Deal analysis'], 'Superior for complex sales documents'),
        _rec('microsoft-copilot-365', 'Microsoft 365 Copilot', 'microsoft', 90, ['CRM integration', 'Email drafting'], 'Deep Dynamics 365 and Outlook integration'),
        _rec('perplexity-pro', 'Perplexity Pro', 'independent', 85, ['Prospect research', 'Industry intel'], 'Real-time research on prospects and industries'),
        _rec('elevenlabs', 'ElevenLabs', 'independent', 78, ['Video messages', 'Training content'], 'Personalized video sales outreach at scale'),
        _rec('zapier-ai', 'Zapier Central', 'automation', 75, ['CRM automation', 'Lead enrichment'], 'Automates data entry and lead workflows'),
    ],
    'cto': [
        _rec('github-copilot', 'GitHub Copilot', 'microsoft', 98, ['Code completion', 'Code review'], 'Essential developer productivity tool'),
        _rec('cursor', 'Cursor', 'independent', 95, ['AI-native development', 'Codebase chat'], 'Most advanced AI code editor available'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 92, ['Architecture design', 'Technical docs'], 'Best-in-class code generation and reasoning'),
        _rec('langchain', 'LangChain', 'langchain', 88, ['AI application building', 'Agent development'], 'Framework for building AI-native features'),
        _rec('aws-bedrock', 'AWS Bedrock', 'independent', 85, ['Enterprise AI infrastructure', 'Model selection'], 'Multi-model access within AWS ecosystem'),
        _rec('huggingface', 'Hugging Face', 'open-source', 82, ['Model experimentation', 'Fine-tuning'], 'Access to latest models and community resources'),
    ],
    'cs-lead': [
        _rec('gpt-4o', 'GPT-4o', 'openai', 95, ['Support chatbot', 'Ticket responses'], 'Most natural customer conversations'),
        _rec('claude-3-5-sonnet', 'Claude 3.5 Sonnet', 'anthropic', 92, ['Complex ticket resolution', 'Documentation'], 'Better at nuanced customer issues'),
        _rec('zapier-ai', 'Zapier Central', 'automation', 88, ['Ticket routing', 'CRM updates'], 'Automates support workflows across tools'),
        _rec('notion-ai', 'Notion AI', 'independent', 85, ['Knowledge base', 'Team docs'], 'Self-updating internal knowledge repository'),
        _rec('cohere-command-r-plus', 'Cohere Command R+', 'independent', 82, ['RAG implementation', 'Knowledge search'], 'Enterprise-grade RAG for support knowledge'),
        _rec('microsoft-copilot-365', 'Microsoft 365 Copilot', 'microsoft', 78, ['Email responses', 'Meeting summaries'], 'Integrated workflow for CS communications'),
    ],
}

# =============================================================================
# EMPLOYEE PERSONA BUILDER
# =============================================================================

EMPLOYEE_DEPARTMENTS = [
    'Engineering', 'Product', 'Design', 'Marketing', 'Sales', 'Customer Success',
    'Operations', 'Finance', 'HR', 'Legal', 'Executive',
]

COMMON_TOOLS = [
    'Slack', 'Microsoft Teams', 'Google Workspace', 'Notion', 'Jira', 'Confluence',
    'GitHub', 'GitLab', 'Figma', 'Salesforce', 'HubSpot', 'Zendesk', 'Linear',
    'Asana', 'Monday.com',
]

ECOSYSTEMS: Dict[str, Dict[str, str]] = {
    'claude': {'label': 'Claude (Anthropic)', 'description': 'System prompt for Claude conversations and Projects'},
    'copilot': {'label': 'Microsoft Copilot', 'description': 'Custom instructions for Microsoft 365 Copilot'},
    'gemini': {'label': 'Google Gemini', 'description': 'Gem configuration for Google Gemini'},
}

EXPORT_TYPES = ['system_prompt', 'context', 'configuration']
PERSONA_STATUSES = ['draft', 'active', 'archived']

COMMUNICATION_STYLE_OPTIONS: Dict[str, Dict[str, Dict[str, str]]] = {
    'formality': {
        'casual': {'label': 'Casual', 'description': 'Relaxed, conversational tone'},
        'balanced': {'label': 'Balanced', 'description': 'Professional but approachable'},
        'formal': {'label': 'Formal', 'description': 'Polished, business-formal language'},
    },
    'detail_level': {
        'concise': {'label': 'Concise', 'description': 'Short answers, key points only'},
        'balanced': {'label': 'Balanced', 'description': 'Enough detail to act on'},
        'detailed': {'label': 'Detailed', 'description': 'Thorough explanations with context'},
    },
    'examples_preference': {
        'minimal': {'label': 'Minimal', 'description': 'Examples only when essential'},
        'moderate': {'label': 'Moderate', 'description': 'An example for non-obvious points'},
        'extensive': {'label': 'Extensive', 'description': 'Multiple worked examples'},
    },
    'technical_depth': {
        'simplified': {'label': 'Simplified', 'description': 'Plain language, no jargon'},
        'balanced': {'label': 'Balanced', 'description': 'Some technical terms, explained'},
        'technical': {'label': 'Technical', 'description': 'Full technical depth'},
    },
}

WORK_PREFERENCE_OPTIONS: Dict[str, List[str]] = {
    'focus_time': ['morning', 'afternoon', 'evening', 'flexible'],
    'collaboration_style': ['async', 'realtime', 'mixed'],
    'decision_making': ['data_driven', 'intuitive', 'collaborative'],
    'feedback_preference': ['direct', 'diplomatic', 'coaching'],
}

AI_INTERACTION_STYLES = ['concise', 'balanced', 'comprehensive']
RESPONSE_LENGTHS = ['short', 'medium', 'long']
TONES = ['casual', 'professional', 'formal']

DEFAULT_COMMUNICATION_STYLE = {
    'formality': 'balanced',
    'detail_level': 'balanced',
    'examples_preference': 'moderate',
    'technical_depth': 'balanced',
}

DEFAULT_WORK_PREFERENCES = {
    'focus_time': 'flexible',
    'collaboration_style': 'mixed',
    'decision_making': 'collaborative',
    'feedback_preference': 'direct',
}
