"""
Content Module - Static sections of the landing page
"""

SITE = {
    'name': 'Portfolio',
    'tagline': 'A Digital Storyteller',
    'intro': 'Journalist, educator, marketer and full stack engineer telling stories '
             'with words, data and code.',
    'social': {
        'email': 'mailto:contact@example.com',
        'linkedin': 'https://www.linkedin.com/',
        'github': 'https://github.com/'
    }
}

NAV_ITEMS = [
    {'name': 'About', 'id': 'about'},
    {'name': 'Experience', 'id': 'experience'},
    {'name': 'Skills', 'id': 'skills'},
    {'name': 'Portfolio', 'id': 'portfolio'},
    {'name': 'Blog', 'id': 'blog'},
    {'name': 'Contact', 'id': 'contact'},
]

ABOUT = {
    'paragraphs': [
        'I work where journalism, education, marketing and software meet.',
        'My reporting covers political, social and cultural stories, and I build '
        'tools that make data readable for everyone.'
    ],
    'highlights': [
        {'label': 'Journalism', 'icon': 'fa-newspaper'},
        {'label': 'Education', 'icon': 'fa-graduation-cap'},
        {'label': 'Marketing', 'icon': 'fa-chart-line'},
        {'label': 'Development', 'icon': 'fa-code'},
    ]
}

EXPERIENCE = [
    {
        'icon': 'fa-code',
        'title': 'Full Stack Software Engineer',
        'company': 'Moringa School',
        'period': 'Current',
        'description': 'Building full-stack applications and contributing to tech education '
                       'while developing scalable web solutions.',
        'skills': ['React', 'Node.js', 'TypeScript', 'Database Design', 'API Development']
    },
    {
        'icon': 'fa-chart-line',
        'title': 'Digital Marketer',
        'company': 'Media Crest College',
        'period': '3 Months Experience',
        'description': 'Crafting digital marketing strategies, managing campaigns, and creating '
                       'engaging content for diverse audiences.',
        'skills': ['Social Media Marketing', 'Content Strategy', 'Campaign Management', 'Analytics']
    },
    {
        'icon': 'fa-briefcase',
        'title': 'Journalist & Content Creator',
        'company': 'Freelance',
        'period': 'Ongoing',
        'description': 'Specializing in political, social, and cultural reporting with expertise '
                       'in data visualization and digital storytelling.',
        'skills': ['Adobe Photoshop', 'Adobe Illustrator', 'Infographic Design',
                   'Data Visualization', 'Ethical Journalism']
    }
]

SKILL_GROUPS = [
    {
        'title': 'Journalism',
        'icon': 'fa-newspaper',
        'skills': [
            {'name': 'Political Reporting', 'level': 90},
            {'name': 'Social & Cultural Reporting', 'level': 85},
            {'name': 'Data Visualization', 'level': 88},
            {'name': 'Digital Storytelling', 'level': 92}
        ]
    },
    {
        'title': 'Design',
        'icon': 'fa-palette',
        'skills': [
            {'name': 'Adobe Photoshop', 'level': 85},
            {'name': 'Adobe Illustrator', 'level': 82},
            {'name': 'Infographic Design', 'level': 88},
            {'name': 'Visual Content Creation', 'level': 90}
        ]
    },
    {
        'title': 'Development',
        'icon': 'fa-code',
        'skills': [
            {'name': 'React & TypeScript', 'level': 85},
            {'name': 'Full Stack Development', 'level': 80},
            {'name': 'Database Management', 'level': 78},
            {'name': 'API Development', 'level': 82}
        ]
    },
    {
        'title': 'Marketing',
        'icon': 'fa-chart-line',
        'skills': [
            {'name': 'Content Strategy', 'level': 85},
            {'name': 'Social Media Marketing', 'level': 82},
            {'name': 'Campaign Management', 'level': 80},
            {'name': 'Analytics & Reporting', 'level': 83}
        ]
    }
]


def get_landing_sections():
    """Static data for the landing page templates"""
    return {
        'site': SITE,
        'nav_items': NAV_ITEMS,
        'about': ABOUT,
        'experience': EXPERIENCE,
        'skill_groups': SKILL_GROUPS
    }


__all__ = ['SITE', 'NAV_ITEMS', 'ABOUT', 'EXPERIENCE', 'SKILL_GROUPS', 'get_landing_sections']
