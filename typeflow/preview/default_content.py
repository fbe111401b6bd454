"""Sample document shown in the preview before any content is imported."""

DEFAULT_PREVIEW_CONTENT = """
<h1>Typography Flow Preview</h1>
<p>This is a preview of your typography settings. Adjust the settings to see how different values affect the flow and readability of text on the page.</p>

<h2>Heading Level 2</h2>
<p>Typography is the art and technique of arranging type to make written language <strong>legible</strong>, <em>readable</em>, and <strong><em>appealing</em></strong> when displayed. The arrangement of type involves selecting typefaces, point sizes, line lengths, line-spacing, and letter-spacing.</p>
<p>Good typography enhances readability, establishes hierarchy, and contributes to the overall aesthetic of a design. It helps guide the reader through the content in a logical and pleasing manner.</p>

<h3>Heading Level 3</h3>
<p>The term "typography" also refers to the style, arrangement, and appearance of the letters, numbers, and symbols created by the process. Type design is a closely related craft, sometimes considered part of typography.</p>

<blockquote>
  <p>Typography is what language looks like.</p>
  <p><cite>&mdash; Ellen Lupton</cite></p>
</blockquote>

<h4>Heading Level 4</h4>
<ul>
  <li>Font size affects readability across different devices</li>
  <li>Line height (leading) impacts how easily text can be scanned</li>
  <li>Letter spacing (tracking) influences the density of text</li>
  <li>Paragraph spacing creates breathing room between blocks of text</li>
</ul>

<h5>Heading Level 5</h5>
<p>In traditional typography, text is composed to create a readable, coherent, and visually satisfying whole that works invisibly, without the awareness of the reader. Even distribution of typeset material, with a minimum of distractions and anomalies, aims to produce clarity and transparency.</p>

<pre><code>// Example code block
function calculateTypography(baseSize, ratio) {
  return {
    h1: baseSize * Math.pow(ratio, 4),
    h2: baseSize * Math.pow(ratio, 3),
    h3: baseSize * Math.pow(ratio, 2),
    h4: baseSize * Math.pow(ratio, 1),
    body: baseSize
  };
}</code></pre>

<h6>Heading Level 6</h6>
<ol>
  <li>Choose appropriate typefaces for your content</li>
  <li>Establish a clear hierarchy with different sizes</li>
  <li>Maintain consistent spacing throughout the document</li>
  <li>Consider the reading environment and audience</li>
</ol>

<hr>

<table>
  <thead>
    <tr>
      <th>Element</th>
      <th>Purpose</th>
      <th>Example Size</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <td>Heading 1</td>
      <td>Main page title</td>
      <td>32px</td>
    </tr>
    <tr>
      <td>Heading 2</td>
      <td>Section headers</td>
      <td>24px</td>
    </tr>
    <tr>
      <td>Body text</td>
      <td>Main content</td>
      <td>16px</td>
    </tr>
  </tbody>
</table>
"""
